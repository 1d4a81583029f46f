"""
Domain Models
=============

Plain dataclasses for the entities managed by the service.
"""
from .company import Company
from .country import Country
from .contact import Contact

__all__ = ["Company", "Country", "Contact"]
