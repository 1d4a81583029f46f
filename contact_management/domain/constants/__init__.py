from .company_fields import CompanyFields
from .country_fields import CountryFields
from .contact_fields import ContactFields

__all__ = ["CompanyFields", "CountryFields", "ContactFields"]
