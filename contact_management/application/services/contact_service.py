"""
Contact Service
===============

Application service for contact operations.
"""
from typing import List, Optional

from contact_management.domain.models.contact import Contact
from contact_management.domain.repositories.repository_factory import RepositoryFactory


class ContactService:
    """Application service for contact operations."""

    def __init__(self, repository_factory: RepositoryFactory):
        self._repository_factory = repository_factory

    def get_all(self) -> List[Contact]:
        return self._repository_factory.create_repository(Contact).get_all()

    def get(self, contact_id: int) -> Contact:
        return self._repository_factory.create_repository(Contact).get(contact_id)

    def save(self, contact: Contact) -> int:
        """Create or update a contact; company and country must exist."""
        return self._repository_factory.create_repository(Contact).save(contact)

    def delete(self, contact_id: int) -> None:
        self._repository_factory.create_repository(Contact).delete(contact_id)

    def get_all_with_company_and_country(self) -> List[Contact]:
        return self._repository_factory.create_contact_repository().get_all_with_company_and_country()

    def filter_by_company_and_country(
        self,
        company_id: Optional[int] = None,
        country_id: Optional[int] = None,
    ) -> List[Contact]:
        """List contacts matching every supplied filter."""
        return self._repository_factory.create_contact_repository().filter_by_company_and_country(
            company_id=company_id,
            country_id=country_id,
        )
