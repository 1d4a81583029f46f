from typing import List

from contact_management.application.validators.base_validator import Validator, check_name
from contact_management.domain.constants.country_fields import CountryFields
from contact_management.domain.exceptions import ValidationFailure
from contact_management.domain.models.country import Country


class CountryValidator(Validator[Country]):
    """Country name is required and 3-100 characters long."""

    def validate(self, target: Country) -> List[ValidationFailure]:
        failure = check_name(target.country_name, CountryFields.COUNTRY_NAME, "Country")
        return [failure] if failure else []
