from typing import List

from contact_management.application.validators.base_validator import (
    Validator,
    check_name,
    check_required_id,
)
from contact_management.domain.constants.contact_fields import ContactFields
from contact_management.domain.exceptions import ValidationFailure
from contact_management.domain.models.contact import Contact


class ContactValidator(Validator[Contact]):
    """
    Contact name is required and 3-100 characters long; company and
    country ids are required. Whether those ids exist is checked by the
    repository, not here.
    """

    def validate(self, target: Contact) -> List[ValidationFailure]:
        checks = [
            check_name(target.contact_name, ContactFields.CONTACT_NAME, "Contact"),
            check_required_id(target.company_id, ContactFields.COMPANY_ID, "CompanyId"),
            check_required_id(target.country_id, ContactFields.COUNTRY_ID, "CountryId"),
        ]
        return [failure for failure in checks if failure is not None]
