"""
Repository Interfaces
=====================

Abstract contracts for data access.
"""
from .repository import Repository
from .company_repository import CompanyRepository
from .contact_repository import ContactRepository
from .country_repository import CountryRepository
from .repository_factory import RepositoryFactory

__all__ = [
    "Repository",
    "CompanyRepository",
    "ContactRepository",
    "CountryRepository",
    "RepositoryFactory",
]
