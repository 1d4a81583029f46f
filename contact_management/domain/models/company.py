"""
Company Model
=============

Domain model representing a company in the system.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass


@dataclass
class Company:
    """
    Company domain model.

    A company owns zero or more contacts. An id of 0 (or below) marks a
    company that has not been persisted yet.
    """
    company_id: int = 0
    company_name: str = ""

    def is_new(self) -> bool:
        """Check if the company still has to be inserted."""
        return self.company_id <= 0
