"""
Database Infrastructure
=======================

SQLAlchemy implementations of the domain repository interfaces.
"""
from .database import Database
from .sql_company_repository import SqlCompanyRepository
from .sql_contact_repository import SqlContactRepository
from .sql_country_repository import SqlCountryRepository
from .repository_factory import RegistryRepositoryFactory

__all__ = [
    "Database",
    "SqlCompanyRepository",
    "SqlContactRepository",
    "SqlCountryRepository",
    "RegistryRepositoryFactory",
]
