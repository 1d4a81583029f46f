"""
Base Validator
==============

Field-level validation shared by the entity validators.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from contact_management.domain.exceptions import ValidationError, ValidationFailure

TargetType = TypeVar("TargetType")

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100


class Validator(ABC, Generic[TargetType]):
    """Produces zero or more failures for a value; never touches the store."""

    @abstractmethod
    def validate(self, target: TargetType) -> List[ValidationFailure]:
        pass

    def validate_or_raise(self, target: TargetType) -> None:
        """
        Validate and raise if anything failed.

        Raises:
            ValidationError: Carrying every failure found
        """
        failures = self.validate(target)
        if failures:
            raise ValidationError(failures)


def check_name(value: Optional[str], field: str, label: str) -> Optional[ValidationFailure]:
    """
    Required + length rule for entity names.

    A blank name only reports that it is required; the length rule
    applies to names that are present.
    """
    if not value or not value.strip():
        return ValidationFailure(field, f"{label} name is required.")
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        return ValidationFailure(
            field,
            f"{label} name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters.",
        )
    return None


def check_required_id(value: Optional[int], field: str, label: str) -> Optional[ValidationFailure]:
    """Foreign keys must be present and non-zero."""
    if not value:
        return ValidationFailure(field, f"{label} cannot be empty")
    return None
