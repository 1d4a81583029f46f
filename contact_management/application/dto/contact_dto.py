"""
Contact DTO
===========

Pydantic models for contact API requests and responses.
"""
from typing import Optional

from pydantic import ConfigDict, Field

from contact_management.application.dto.base_dto import CamelModel
from contact_management.application.dto.company_dto import CompanyResponse
from contact_management.application.dto.country_dto import CountryResponse
from contact_management.domain.models.contact import Contact


class ContactRequest(CamelModel):
    """DTO for creating (contactId <= 0) or updating (contactId > 0) a contact."""
    contact_id: Optional[int] = Field(0, description="0 to create, existing id to update")
    contact_name: Optional[str] = Field(None, description="Contact name, 3-100 characters")
    company_id: Optional[int] = Field(None, description="Id of an existing company")
    country_id: Optional[int] = Field(None, description="Id of an existing country")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "contactId": 0,
                "contactName": "Jane Doe",
                "companyId": 1,
                "countryId": 1,
            }
        }
    )

    def to_entity(self) -> Contact:
        return Contact(
            contact_id=self.contact_id or 0,
            contact_name=self.contact_name or "",
            company_id=self.company_id or 0,
            country_id=self.country_id or 0,
        )


class ContactResponse(CamelModel):
    """DTO for contact data; company and country are set by the joined query only."""
    contact_id: int
    contact_name: str
    company_id: int
    country_id: int
    company: Optional[CompanyResponse] = None
    country: Optional[CountryResponse] = None

    @classmethod
    def from_entity(cls, contact: Contact) -> "ContactResponse":
        return cls(
            contact_id=contact.contact_id,
            contact_name=contact.contact_name,
            company_id=contact.company_id,
            country_id=contact.country_id,
            company=CompanyResponse.from_entity(contact.company) if contact.company else None,
            country=CountryResponse.from_entity(contact.country) if contact.country else None,
        )


class ContactSaveResponse(CamelModel):
    """DTO returned after saving a contact."""
    contact_id: int
