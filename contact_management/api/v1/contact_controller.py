"""
Contact Controller
==================

FastAPI controller for contact management endpoints.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from contact_management.api.v1.dependencies import (
    get_contact_service,
    get_contact_validator,
    require_bearer_token,
)
from contact_management.application.dto.base_dto import DeleteResponse
from contact_management.application.dto.contact_dto import (
    ContactRequest,
    ContactResponse,
    ContactSaveResponse,
)
from contact_management.application.services.contact_service import ContactService
from contact_management.application.validators.contact_validator import ContactValidator

router = APIRouter(tags=["contact"])


@router.get(
    "",
    response_model=List[ContactResponse],
    summary="List contacts",
    description="Requires a bearer token from /auth/login.",
    dependencies=[Depends(require_bearer_token)],
)
def get_all_contacts(
    service: ContactService = Depends(get_contact_service),
) -> List[ContactResponse]:
    return [ContactResponse.from_entity(contact) for contact in service.get_all()]


@router.get(
    "/with-company-and-country",
    response_model=List[ContactResponse],
    summary="List contacts with their company and country",
)
def get_contacts_with_company_and_country(
    service: ContactService = Depends(get_contact_service),
) -> List[ContactResponse]:
    return [
        ContactResponse.from_entity(contact)
        for contact in service.get_all_with_company_and_country()
    ]


@router.get(
    "/filter",
    response_model=List[ContactResponse],
    summary="Filter contacts by company and/or country",
    description="Filters that are left out are not applied. Unknown ids answer 404."
)
def filter_contacts(
    company_id: Optional[int] = Query(None, alias="companyId"),
    country_id: Optional[int] = Query(None, alias="countryId"),
    service: ContactService = Depends(get_contact_service),
) -> List[ContactResponse]:
    contacts = service.filter_by_company_and_country(company_id=company_id, country_id=country_id)
    return [ContactResponse.from_entity(contact) for contact in contacts]


@router.get(
    "/{contact_id}",
    response_model=ContactResponse,
    summary="Get contact by ID",
)
def get_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    return ContactResponse.from_entity(service.get(contact_id))


@router.post(
    "",
    response_model=ContactSaveResponse,
    summary="Create or update a contact",
    description="""
    contactId <= 0 creates a new contact, a positive contactId updates an
    existing one. The referenced company and country must exist (404 otherwise).
    """
)
def save_contact(
    request: ContactRequest,
    service: ContactService = Depends(get_contact_service),
    validator: ContactValidator = Depends(get_contact_validator),
) -> ContactSaveResponse:
    """Validate and save a contact."""
    contact = request.to_entity()
    validator.validate_or_raise(contact)
    return ContactSaveResponse(contact_id=service.save(contact))


@router.delete(
    "/{contact_id}",
    response_model=DeleteResponse,
    summary="Delete a contact",
)
def delete_contact(
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
) -> DeleteResponse:
    service.delete(contact_id)
    return DeleteResponse(id=contact_id)
