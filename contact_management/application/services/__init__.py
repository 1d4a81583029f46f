"""
Application Services
====================

One service per entity plus authentication.
"""
from .company_service import CompanyService
from .contact_service import ContactService
from .country_service import CountryService
from .auth_service import AuthService

__all__ = ["CompanyService", "ContactService", "CountryService", "AuthService"]
