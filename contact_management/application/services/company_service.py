"""
Company Service
===============

Application service for company operations.
Delegates to the repositories resolved through the repository factory.
"""
from typing import List

from contact_management.domain.models.company import Company
from contact_management.domain.repositories.repository_factory import RepositoryFactory


class CompanyService:
    """Application service for company operations."""

    def __init__(self, repository_factory: RepositoryFactory):
        """
        Initialize service with the repository factory.

        Args:
            repository_factory: Resolves company repositories
        """
        self._repository_factory = repository_factory

    def get_all(self) -> List[Company]:
        """Get every company."""
        return self._repository_factory.create_repository(Company).get_all()

    def get(self, company_id: int) -> Company:
        """Get a company by id (NotFoundError if missing)."""
        return self._repository_factory.create_repository(Company).get(company_id)

    def save(self, company: Company) -> int:
        """Create or update a company and return its id."""
        return self._repository_factory.create_repository(Company).save(company)

    def delete(self, company_id: int) -> None:
        """Delete a company together with its contacts."""
        self._repository_factory.create_repository(Company).delete(company_id)

    def get_page(self, page_number: int, page_size: int) -> List[Company]:
        """Get one page of companies."""
        return self._repository_factory.create_company_repository().get_page(page_number, page_size)

    def get_total_count(self) -> int:
        """Count all companies."""
        return self._repository_factory.create_company_repository().get_total_count()
