"""
Contact Repository Interface
============================

Abstract interface for contact data access.
"""
from abc import abstractmethod
from typing import List, Optional

from contact_management.domain.models.contact import Contact
from contact_management.domain.repositories.repository import Repository


class ContactRepository(Repository[Contact]):
    """Contact persistence operations with join and filter queries."""

    @abstractmethod
    def get_all_with_company_and_country(self) -> List[Contact]:
        """
        Get every contact with its company and country loaded.

        Returns:
            List of contacts with `company` and `country` populated
        """
        pass

    @abstractmethod
    def filter_by_company_and_country(
        self,
        company_id: Optional[int] = None,
        country_id: Optional[int] = None,
    ) -> List[Contact]:
        """
        Filter contacts by company and/or country.

        A filter that is None is not applied.

        Args:
            company_id: Optional company filter
            country_id: Optional country filter

        Returns:
            Contacts matching every supplied filter

        Raises:
            NotFoundError: If a supplied filter id does not exist
        """
        pass
