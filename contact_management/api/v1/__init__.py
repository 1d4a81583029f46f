"""
API v1 Package
===============

Version 1 API controllers.
"""
from .company_controller import router as company_router
from .contact_controller import router as contact_router
from .country_controller import router as country_router
from .auth_controller import router as auth_router

__all__ = ["company_router", "contact_router", "country_router", "auth_router"]
