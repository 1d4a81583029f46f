import logging
from typing import TYPE_CHECKING

from ...domain.models.company import Company
from ...domain.models.contact import Contact
from ...domain.models.country import Country
from ...domain.repositories.company_repository import CompanyRepository
from ...domain.repositories.contact_repository import ContactRepository
from ...domain.repositories.country_repository import CountryRepository
from ...domain.repositories.repository_factory import RepositoryFactory
from ...infrastructure.db.database import Database
from ...infrastructure.db.repository_factory import RegistryRepositoryFactory
from ...infrastructure.db.sql_company_repository import SqlCompanyRepository
from ...infrastructure.db.sql_contact_repository import SqlContactRepository
from ...infrastructure.db.sql_country_repository import SqlCountryRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations and the factory that serves them.
        Gets the database from the database provider and creates repository instances.
        """
        database = container.get(Database)
        logger = container.get(logging.Logger).getChild("repository")

        company_repository = SqlCompanyRepository(database, logger.getChild("company"))
        contact_repository = SqlContactRepository(database, logger.getChild("contact"))
        country_repository = SqlCountryRepository(database, logger.getChild("country"))

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(CompanyRepository, company_repository)
        container.register_singleton(ContactRepository, contact_repository)
        container.register_singleton(CountryRepository, country_repository)

        factory = RegistryRepositoryFactory()
        factory.register(Company, company_repository)
        factory.register(Contact, contact_repository)
        factory.register(Country, country_repository)
        container.register_singleton(RepositoryFactory, factory)
