"""
Country Service
===============

Application service for country operations.
"""
from typing import Dict, List

from contact_management.domain.models.country import Country
from contact_management.domain.repositories.repository_factory import RepositoryFactory


class CountryService:
    """Application service for country operations."""

    def __init__(self, repository_factory: RepositoryFactory):
        self._repository_factory = repository_factory

    def get_all(self) -> List[Country]:
        return self._repository_factory.create_repository(Country).get_all()

    def get(self, country_id: int) -> Country:
        return self._repository_factory.create_repository(Country).get(country_id)

    def save(self, country: Country) -> int:
        return self._repository_factory.create_repository(Country).save(country)

    def delete(self, country_id: int) -> None:
        self._repository_factory.create_repository(Country).delete(country_id)

    def get_company_statistics_by_country(self, country_id: int) -> Dict[str, int]:
        """Contacts per company name within one country."""
        return self._repository_factory.create_country_repository().get_company_statistics_by_country(country_id)
