from typing import TYPE_CHECKING

from ...domain.repositories.repository_factory import RepositoryFactory
from ...application.services.company_service import CompanyService
from ...application.services.contact_service import ContactService
from ...application.services.country_service import CountryService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Entity service provider - registers company, contact and country services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register entity services.
        Services are created with the repository factory from container.
        """
        repository_factory = container.get(RepositoryFactory)

        container.register_singleton(CompanyService, CompanyService(repository_factory=repository_factory))
        container.register_singleton(ContactService, ContactService(repository_factory=repository_factory))
        container.register_singleton(CountryService, CountryService(repository_factory=repository_factory))
