"""
Registry Repository Factory
===========================

RepositoryFactory backed by a registry keyed by entity type.
Populated once at startup by the repository provider.
"""
from typing import Any, Dict, Type

from contact_management.domain.models.company import Company
from contact_management.domain.models.contact import Contact
from contact_management.domain.models.country import Country
from contact_management.domain.repositories.company_repository import CompanyRepository
from contact_management.domain.repositories.contact_repository import ContactRepository
from contact_management.domain.repositories.country_repository import CountryRepository
from contact_management.domain.repositories.repository import EntityType, Repository
from contact_management.domain.repositories.repository_factory import RepositoryFactory


class RegistryRepositoryFactory(RepositoryFactory):
    """Resolves repositories from an explicit entity-type registry."""

    def __init__(self) -> None:
        self._repositories: Dict[Type[Any], Repository[Any]] = {}

    def register(self, entity_type: Type[EntityType], repository: Repository[EntityType]) -> None:
        """
        Register the repository serving an entity type.

        Args:
            entity_type: Domain model class
            repository: Repository instance for that model
        """
        self._repositories[entity_type] = repository

    def create_repository(self, entity_type: Type[EntityType]) -> Repository[EntityType]:
        try:
            return self._repositories[entity_type]
        except KeyError:
            raise LookupError(f"No repository registered for {entity_type.__name__}") from None

    def _create_typed(self, entity_type: Type[Any], repository_type: Type[Any]) -> Any:
        repository = self.create_repository(entity_type)
        if not isinstance(repository, repository_type):
            raise TypeError(
                f"Repository registered for {entity_type.__name__} is not a {repository_type.__name__}"
            )
        return repository

    def create_company_repository(self) -> CompanyRepository:
        return self._create_typed(Company, CompanyRepository)

    def create_contact_repository(self) -> ContactRepository:
        return self._create_typed(Contact, ContactRepository)

    def create_country_repository(self) -> CountryRepository:
        return self._create_typed(Country, CountryRepository)
