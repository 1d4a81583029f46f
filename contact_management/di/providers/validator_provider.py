from typing import TYPE_CHECKING

from ...application.validators.company_validator import CompanyValidator
from ...application.validators.contact_validator import ContactValidator
from ...application.validators.country_validator import CountryValidator

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ValidatorProvider:
    """Validator provider - registers the per-entity validators"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(CompanyValidator, CompanyValidator())
        container.register_singleton(ContactValidator, ContactValidator())
        container.register_singleton(CountryValidator, CountryValidator())
