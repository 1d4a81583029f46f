"""
Country Controller
==================

FastAPI controller for country management endpoints.
"""
from typing import Dict, List

from fastapi import APIRouter, Depends

from contact_management.api.v1.dependencies import get_country_service, get_country_validator
from contact_management.application.dto.base_dto import DeleteResponse
from contact_management.application.dto.country_dto import (
    CountryRequest,
    CountryResponse,
    CountrySaveResponse,
)
from contact_management.application.services.country_service import CountryService
from contact_management.application.validators.country_validator import CountryValidator

router = APIRouter(tags=["country"])


@router.get(
    "",
    response_model=List[CountryResponse],
    summary="List countries",
)
def get_all_countries(
    service: CountryService = Depends(get_country_service),
) -> List[CountryResponse]:
    return [CountryResponse.from_entity(country) for country in service.get_all()]


@router.get(
    "/{country_id}",
    response_model=CountryResponse,
    summary="Get country by ID",
)
def get_country(
    country_id: int,
    service: CountryService = Depends(get_country_service),
) -> CountryResponse:
    return CountryResponse.from_entity(service.get(country_id))


@router.post(
    "",
    response_model=CountrySaveResponse,
    summary="Create or update a country",
)
def save_country(
    request: CountryRequest,
    service: CountryService = Depends(get_country_service),
    validator: CountryValidator = Depends(get_country_validator),
) -> CountrySaveResponse:
    """Validate and save a country."""
    country = request.to_entity()
    validator.validate_or_raise(country)
    return CountrySaveResponse(country_id=service.save(country))


@router.delete(
    "/{country_id}",
    response_model=DeleteResponse,
    summary="Delete a country",
    description="Deletes the country and every contact located in it."
)
def delete_country(
    country_id: int,
    service: CountryService = Depends(get_country_service),
) -> DeleteResponse:
    service.delete(country_id)
    return DeleteResponse(id=country_id)


@router.get(
    "/{country_id}/company-statistics",
    response_model=Dict[str, int],
    summary="Contacts per company in a country",
    description="""
    Maps each company name to the number of the country's contacts
    working there. Companies sharing a name are counted together.
    A country without contacts yields an empty object.
    """
)
def get_company_statistics(
    country_id: int,
    service: CountryService = Depends(get_country_service),
) -> Dict[str, int]:
    return service.get_company_statistics_by_country(country_id)
