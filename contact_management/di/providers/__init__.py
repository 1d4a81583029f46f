"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .validator_provider import ValidatorProvider
from .service_provider import ServiceProvider
from .auth_provider import AuthProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "ValidatorProvider",
    "ServiceProvider",
    "AuthProvider",
]
