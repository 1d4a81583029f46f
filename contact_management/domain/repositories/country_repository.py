"""
Country Repository Interface
============================

Abstract interface for country data access.
"""
from abc import abstractmethod
from typing import Dict

from contact_management.domain.models.country import Country
from contact_management.domain.repositories.repository import Repository


class CountryRepository(Repository[Country]):
    """Country persistence operations plus per-country statistics."""

    @abstractmethod
    def get_company_statistics_by_country(self, country_id: int) -> Dict[str, int]:
        """
        Count the country's contacts per company name.

        Args:
            country_id: Country identifier

        Returns:
            Mapping of company name to contact count, empty if the
            country has no contacts
        """
        pass
