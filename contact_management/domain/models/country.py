"""
Country Model
=============

Domain model representing a country in the system.
"""
from dataclasses import dataclass


@dataclass
class Country:
    """
    Country domain model.

    A country owns zero or more contacts. An id of 0 (or below) marks a
    country that has not been persisted yet.
    """
    country_id: int = 0
    country_name: str = ""

    def is_new(self) -> bool:
        """Check if the country still has to be inserted."""
        return self.country_id <= 0
