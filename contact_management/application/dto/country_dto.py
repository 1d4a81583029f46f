"""
Country DTO
===========

Pydantic models for country API requests and responses.
"""
from typing import Optional

from pydantic import ConfigDict, Field

from contact_management.application.dto.base_dto import CamelModel
from contact_management.domain.models.country import Country


class CountryRequest(CamelModel):
    """DTO for creating (countryId <= 0) or updating (countryId > 0) a country."""
    country_id: Optional[int] = Field(0, description="0 to create, existing id to update")
    country_name: Optional[str] = Field(None, description="Country name, 3-100 characters")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "countryId": 0,
                "countryName": "North Macedonia",
            }
        }
    )

    def to_entity(self) -> Country:
        return Country(
            country_id=self.country_id or 0,
            country_name=self.country_name or "",
        )


class CountryResponse(CamelModel):
    """DTO for country data."""
    country_id: int
    country_name: str

    @classmethod
    def from_entity(cls, country: Country) -> "CountryResponse":
        return cls(country_id=country.country_id, country_name=country.country_name)


class CountrySaveResponse(CamelModel):
    """DTO returned after saving a country."""
    country_id: int
