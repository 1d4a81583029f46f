"""
Company DTO
===========

Pydantic models for company API requests and responses.
"""
from typing import List, Optional

from pydantic import ConfigDict, Field

from contact_management.application.dto.base_dto import CamelModel
from contact_management.domain.models.company import Company


class CompanyRequest(CamelModel):
    """DTO for creating (companyId <= 0) or updating (companyId > 0) a company."""
    company_id: Optional[int] = Field(0, description="0 to create, existing id to update")
    company_name: Optional[str] = Field(None, description="Company name, 3-100 characters")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "companyId": 0,
                "companyName": "Acme Corporation",
            }
        }
    )

    def to_entity(self) -> Company:
        return Company(
            company_id=self.company_id or 0,
            company_name=self.company_name or "",
        )


class CompanyResponse(CamelModel):
    """DTO for company data."""
    company_id: int
    company_name: str

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyResponse":
        return cls(company_id=company.company_id, company_name=company.company_name)


class CompanySaveResponse(CamelModel):
    """DTO returned after saving a company."""
    company_id: int


class CompanyPageResponse(CamelModel):
    """DTO for one page of companies with paging metadata."""
    page_number: int
    page_size: int
    total_pages: int
    total_records: int
    data: List[CompanyResponse]
