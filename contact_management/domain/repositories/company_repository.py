"""
Company Repository Interface
============================

Abstract interface for company data access.
"""
from abc import abstractmethod
from typing import List

from contact_management.domain.models.company import Company
from contact_management.domain.repositories.repository import Repository


class CompanyRepository(Repository[Company]):
    """Company persistence operations, including pagination."""

    @abstractmethod
    def get_page(self, page_number: int, page_size: int) -> List[Company]:
        """
        Get one page of companies in primary key order.

        Args:
            page_number: 1-based page number
            page_size: Number of companies per page

        Returns:
            Companies in [(page_number - 1) * page_size, page_number * page_size)

        Raises:
            ValidationError: If page_number or page_size is below 1
        """
        pass

    @abstractmethod
    def get_total_count(self) -> int:
        """
        Count all companies.

        Returns:
            Total number of companies
        """
        pass
