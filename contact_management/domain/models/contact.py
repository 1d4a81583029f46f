"""
Contact Model
=============

Domain model representing a contact person.
A contact always belongs to exactly one company and one country.
"""
from dataclasses import dataclass
from typing import Optional

from contact_management.domain.models.company import Company
from contact_management.domain.models.country import Country


@dataclass
class Contact:
    """
    Contact domain model.

    `company` and `country` are only populated by queries that eagerly
    load the related records; everywhere else they stay None and the
    foreign keys are authoritative.
    """
    contact_id: int = 0
    contact_name: str = ""
    company_id: int = 0
    country_id: int = 0
    company: Optional[Company] = None
    country: Optional[Country] = None

    def is_new(self) -> bool:
        """Check if the contact still has to be inserted."""
        return self.contact_id <= 0
