"""
Company Controller
==================

FastAPI controller for company management endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from contact_management.api.v1.dependencies import get_company_service, get_company_validator
from contact_management.application.dto.base_dto import DeleteResponse
from contact_management.application.dto.company_dto import (
    CompanyPageResponse,
    CompanyRequest,
    CompanyResponse,
    CompanySaveResponse,
)
from contact_management.application.services.company_service import CompanyService
from contact_management.application.validators.company_validator import CompanyValidator

router = APIRouter(tags=["company"])


@router.get(
    "",
    response_model=List[CompanyResponse],
    summary="List companies",
)
def get_all_companies(
    service: CompanyService = Depends(get_company_service),
) -> List[CompanyResponse]:
    """Get every company."""
    return [CompanyResponse.from_entity(company) for company in service.get_all()]


@router.get(
    "/page",
    response_model=CompanyPageResponse,
    summary="List companies page by page",
    description="Returns one page of companies plus paging metadata. pageNumber and pageSize must be at least 1."
)
def get_company_page(
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(2, alias="pageSize"),
    service: CompanyService = Depends(get_company_service),
) -> CompanyPageResponse:
    """Get one page of companies."""
    companies = service.get_page(page_number, page_size)
    total_records = service.get_total_count()

    return CompanyPageResponse(
        page_number=page_number,
        page_size=page_size,
        total_pages=(total_records + page_size - 1) // page_size,
        total_records=total_records,
        data=[CompanyResponse.from_entity(company) for company in companies],
    )


@router.get(
    "/{company_id}",
    response_model=CompanyResponse,
    summary="Get company by ID",
)
def get_company(
    company_id: int,
    service: CompanyService = Depends(get_company_service),
) -> CompanyResponse:
    """Get a specific company by ID."""
    return CompanyResponse.from_entity(service.get(company_id))


@router.post(
    "",
    response_model=CompanySaveResponse,
    summary="Create or update a company",
    description="""
    companyId <= 0 creates a new company, a positive companyId updates
    the existing company with that id (404 if there is none).
    """
)
def save_company(
    request: CompanyRequest,
    service: CompanyService = Depends(get_company_service),
    validator: CompanyValidator = Depends(get_company_validator),
) -> CompanySaveResponse:
    """Validate and save a company."""
    company = request.to_entity()
    validator.validate_or_raise(company)
    return CompanySaveResponse(company_id=service.save(company))


@router.delete(
    "/{company_id}",
    response_model=DeleteResponse,
    summary="Delete a company",
    description="Deletes the company and every contact that belongs to it."
)
def delete_company(
    company_id: int,
    service: CompanyService = Depends(get_company_service),
) -> DeleteResponse:
    service.delete(company_id)
    return DeleteResponse(id=company_id)
