from typing import List

from contact_management.application.validators.base_validator import Validator, check_name
from contact_management.domain.constants.company_fields import CompanyFields
from contact_management.domain.exceptions import ValidationFailure
from contact_management.domain.models.company import Company


class CompanyValidator(Validator[Company]):
    """Company name is required and 3-100 characters long."""

    def validate(self, target: Company) -> List[ValidationFailure]:
        failure = check_name(target.company_name, CompanyFields.COMPANY_NAME, "Company")
        return [failure] if failure else []
