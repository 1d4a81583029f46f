"""
Validators
==========

Per-entity field validation applied before any write.
"""
from .base_validator import Validator
from .company_validator import CompanyValidator
from .country_validator import CountryValidator
from .contact_validator import ContactValidator

__all__ = [
    "Validator",
    "CompanyValidator",
    "CountryValidator",
    "ContactValidator",
]
