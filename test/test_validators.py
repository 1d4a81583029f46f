import pytest

from contact_management.application.validators.company_validator import CompanyValidator
from contact_management.application.validators.contact_validator import ContactValidator
from contact_management.application.validators.country_validator import CountryValidator
from contact_management.domain.exceptions import ValidationError, ValidationFailure
from contact_management.domain.models.company import Company
from contact_management.domain.models.contact import Contact
from contact_management.domain.models.country import Country


def test_empty_company_name_yields_exactly_one_failure():
    failures = CompanyValidator().validate(Company(company_name=""))

    assert failures == [ValidationFailure("companyName", "Company name is required.")]


@pytest.mark.parametrize("name", [None, "   "])
def test_missing_or_blank_company_name_is_required(name):
    failures = CompanyValidator().validate(Company(company_name=name))

    assert [f.message for f in failures] == ["Company name is required."]


@pytest.mark.parametrize("name", ["ab", "x" * 101])
def test_company_name_outside_length_bounds(name):
    failures = CompanyValidator().validate(Company(company_name=name))

    assert len(failures) == 1
    assert failures[0].field == "companyName"
    assert failures[0].message == "Company name must be between 3 and 100 characters."


@pytest.mark.parametrize("name", ["Acme", "abc", "x" * 100])
def test_company_name_within_bounds_passes(name):
    assert CompanyValidator().validate(Company(company_name=name)) == []


def test_country_name_rules():
    validator = CountryValidator()

    assert validator.validate(Country(country_name="")) == [
        ValidationFailure("countryName", "Country name is required.")
    ]
    assert validator.validate(Country(country_name="UK"))[0].message == (
        "Country name must be between 3 and 100 characters."
    )
    assert validator.validate(Country(country_name="Germany")) == []


def test_invalid_contact_yields_one_failure_per_field():
    failures = ContactValidator().validate(Contact(contact_name="", company_id=0, country_id=0))

    assert len(failures) == 3
    by_field = {failure.field: failure.message for failure in failures}
    assert by_field == {
        "contactName": "Contact name is required.",
        "companyId": "CompanyId cannot be empty",
        "countryId": "CountryId cannot be empty",
    }


def test_contact_failures_are_independent():
    failures = ContactValidator().validate(Contact(contact_name="Jane Doe", company_id=3, country_id=0))

    assert failures == [ValidationFailure("countryId", "CountryId cannot be empty")]


def test_valid_contact_passes():
    contact = Contact(contact_name="Jane Doe", company_id=1, country_id=2)

    assert ContactValidator().validate(contact) == []


def test_validation_does_not_check_foreign_key_existence():
    # Ids that do not exist anywhere still pass field validation
    contact = Contact(contact_name="Jane Doe", company_id=999, country_id=-5)

    assert ContactValidator().validate(contact) == []


def test_validate_or_raise_carries_every_failure():
    with pytest.raises(ValidationError) as exc_info:
        ContactValidator().validate_or_raise(Contact())

    assert len(exc_info.value.failures) == 3
    body = exc_info.value.to_dict()
    assert body["code"] == "validation_failed"
    assert {error["field"] for error in body["errors"]} == {"contactName", "companyId", "countryId"}


def test_validate_or_raise_is_silent_for_valid_entities():
    CompanyValidator().validate_or_raise(Company(company_name="Acme"))
