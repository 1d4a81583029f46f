"""
Dependency Providers
====================

FastAPI dependencies resolving services from the DI container that
create_application() stores on app.state.
"""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from contact_management.application.services.auth_service import AuthService
from contact_management.application.services.company_service import CompanyService
from contact_management.application.services.contact_service import ContactService
from contact_management.application.services.country_service import CountryService
from contact_management.application.validators.company_validator import CompanyValidator
from contact_management.application.validators.contact_validator import ContactValidator
from contact_management.application.validators.country_validator import CountryValidator
from contact_management.di.container import DIContainer
from contact_management.domain.exceptions import AuthenticationError

_bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> DIContainer:
    """
    Get the DI container of the running application.

    Returns:
        DIContainer instance built at startup
    """
    return request.app.state.container


def get_company_service(container: DIContainer = Depends(get_container)) -> CompanyService:
    return container.get(CompanyService)


def get_contact_service(container: DIContainer = Depends(get_container)) -> ContactService:
    return container.get(ContactService)


def get_country_service(container: DIContainer = Depends(get_container)) -> CountryService:
    return container.get(CountryService)


def get_auth_service(container: DIContainer = Depends(get_container)) -> AuthService:
    return container.get(AuthService)


def get_company_validator(container: DIContainer = Depends(get_container)) -> CompanyValidator:
    return container.get(CompanyValidator)


def get_contact_validator(container: DIContainer = Depends(get_container)) -> ContactValidator:
    return container.get(ContactValidator)


def get_country_validator(container: DIContainer = Depends(get_container)) -> CountryValidator:
    return container.get(CountryValidator)


def require_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> dict:
    """
    Reject requests without a valid `Authorization: Bearer <token>` header.

    Returns:
        Claims of the verified token
    """
    if credentials is None:
        raise AuthenticationError("Missing bearer token")
    return auth_service.verify_token(credentials.credentials)
