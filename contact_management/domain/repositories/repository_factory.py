"""
Repository Factory Interface
============================

Resolves repositories by capability so services never construct
persistence objects themselves.
"""
from abc import ABC, abstractmethod
from typing import Type

from contact_management.domain.repositories.repository import EntityType, Repository
from contact_management.domain.repositories.company_repository import CompanyRepository
from contact_management.domain.repositories.contact_repository import ContactRepository
from contact_management.domain.repositories.country_repository import CountryRepository


class RepositoryFactory(ABC):
    """Ask for a capability, get an implementation."""

    @abstractmethod
    def create_repository(self, entity_type: Type[EntityType]) -> Repository[EntityType]:
        """
        Get the CRUD repository for an entity type.

        Args:
            entity_type: Domain model class (Company, Contact or Country)

        Returns:
            Repository for that entity

        Raises:
            LookupError: If no repository is registered for the type
        """
        pass

    @abstractmethod
    def create_company_repository(self) -> CompanyRepository:
        pass

    @abstractmethod
    def create_contact_repository(self) -> ContactRepository:
        pass

    @abstractmethod
    def create_country_repository(self) -> CountryRepository:
        pass
