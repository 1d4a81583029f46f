import math

import pytest
from sqlalchemy import text

from contact_management.domain.exceptions import NotFoundError, StoreError, ValidationError
from contact_management.domain.models.company import Company
from contact_management.domain.models.contact import Contact
from contact_management.domain.models.country import Country
from contact_management.infrastructure.db.database import Database


# Save / Get / Delete

def test_save_with_non_positive_id_creates_new_rows(company_repository):
    first_id = company_repository.save(Company(company_name="Acme"))
    second_id = company_repository.save(Company(company_id=-1, company_name="Beta"))

    assert first_id > 0
    assert second_id > 0
    assert first_id != second_id
    assert company_repository.get(second_id) == Company(company_id=second_id, company_name="Beta")


def test_save_writes_assigned_id_back_onto_entity(country_repository):
    country = Country(country_name="Germany")

    saved_id = country_repository.save(country)

    assert country.country_id == saved_id


def test_save_with_positive_id_updates_existing_row(company_repository):
    company_id = company_repository.save(Company(company_name="Acme"))

    returned_id = company_repository.save(Company(company_id=company_id, company_name="Acme Ltd"))

    assert returned_id == company_id
    assert company_repository.get(company_id).company_name == "Acme Ltd"
    assert company_repository.get_total_count() == 1


@pytest.mark.parametrize("repository_fixture, entity, entity_name", [
    ("company_repository", Company(company_id=42, company_name="Ghost"), "Company"),
    ("country_repository", Country(country_id=42, country_name="Atlantis"), "Country"),
])
def test_update_of_missing_row_fails_without_writing(request, repository_fixture, entity, entity_name):
    repository = request.getfixturevalue(repository_fixture)

    with pytest.raises(NotFoundError) as exc_info:
        repository.save(entity)

    assert exc_info.value.entity == entity_name
    assert str(exc_info.value) == f"{entity_name} with ID 42 not found."
    assert repository.get_all() == []


def test_get_missing_row_raises_not_found(contact_repository):
    with pytest.raises(NotFoundError):
        contact_repository.get(7)


def test_delete_missing_row_leaves_store_unchanged(company_repository, seed):
    seed.company("Acme")

    with pytest.raises(NotFoundError):
        company_repository.delete(999)

    assert company_repository.get_total_count() == 1


def test_delete_removes_row(country_repository, seed):
    country_id = seed.country("Germany")

    country_repository.delete(country_id)

    with pytest.raises(NotFoundError):
        country_repository.get(country_id)


def test_get_all_is_ordered_by_id(company_repository, seed):
    ids = [seed.company(name) for name in ("Zeta", "Alpha", "Mid")]

    assert [company.company_id for company in company_repository.get_all()] == ids


def test_store_failures_surface_as_store_error(company_repository):
    with pytest.raises(StoreError):
        company_repository.save(Company(company_name=None))

    assert company_repository.get_total_count() == 0


# Cascade

def test_deleting_company_removes_its_contacts(company_repository, contact_repository, seed):
    acme = seed.company("Acme")
    beta = seed.company("Beta")
    germany = seed.country("Germany")
    seed.contact("Anna", acme, germany)
    seed.contact("Ben", acme, germany)
    survivor = seed.contact("Carl", beta, germany)

    company_repository.delete(acme)

    assert [contact.contact_id for contact in contact_repository.get_all()] == [survivor]


def test_deleting_country_removes_its_contacts(country_repository, contact_repository, seed):
    acme = seed.company("Acme")
    germany = seed.country("Germany")
    france = seed.country("France")
    removed = seed.contact("Anna", acme, germany)
    kept = seed.contact("Zoe", acme, france)

    country_repository.delete(germany)

    remaining = [contact.contact_id for contact in contact_repository.get_all()]
    assert remaining == [kept]
    with pytest.raises(NotFoundError):
        contact_repository.get(removed)


def test_foreign_keys_cascade_at_the_database_level(container, contact_repository, seed):
    acme = seed.company("Acme")
    germany = seed.country("Germany")
    seed.contact("Anna", acme, germany)

    with container.get(Database).engine.begin() as connection:
        connection.execute(text("DELETE FROM companies WHERE company_id = :id"), {"id": acme})

    assert contact_repository.get_all() == []


# Contact references

def test_contact_with_missing_company_is_rejected(contact_repository, seed):
    germany = seed.country("Germany")

    with pytest.raises(NotFoundError) as exc_info:
        contact_repository.save(Contact(contact_name="Anna", company_id=99, country_id=germany))

    assert exc_info.value.entity == "Company"
    assert "Company with ID 99" in str(exc_info.value)
    assert contact_repository.get_all() == []


def test_contact_with_missing_country_is_rejected(contact_repository, seed):
    acme = seed.company("Acme")

    with pytest.raises(NotFoundError) as exc_info:
        contact_repository.save(Contact(contact_name="Anna", company_id=acme, country_id=77))

    assert exc_info.value.entity == "Country"
    assert contact_repository.get_all() == []


def test_contact_update_to_missing_company_keeps_original_row(contact_repository, seed):
    acme = seed.company("Acme")
    germany = seed.country("Germany")
    contact_id = seed.contact("Anna", acme, germany)

    with pytest.raises(NotFoundError):
        contact_repository.save(
            Contact(contact_id=contact_id, contact_name="Anna B", company_id=500, country_id=germany)
        )

    assert contact_repository.get(contact_id) == Contact(
        contact_id=contact_id, contact_name="Anna", company_id=acme, country_id=germany
    )


def test_update_of_missing_contact_is_not_an_insert(contact_repository, seed):
    acme = seed.company("Acme")
    germany = seed.country("Germany")

    with pytest.raises(NotFoundError) as exc_info:
        contact_repository.save(Contact(contact_id=12, contact_name="Anna", company_id=acme, country_id=germany))

    assert exc_info.value.entity == "Contact"
    assert contact_repository.get_all() == []


def test_contacts_with_company_and_country_are_populated(contact_repository, seed):
    acme = seed.company("Acme")
    germany = seed.country("Germany")
    seed.contact("Anna", acme, germany)

    [contact] = contact_repository.get_all_with_company_and_country()

    assert contact.company == Company(company_id=acme, company_name="Acme")
    assert contact.country == Country(country_id=germany, country_name="Germany")


def test_plain_get_all_does_not_load_related_records(contact_repository, seed):
    seed.contact("Anna", seed.company("Acme"), seed.country("Germany"))

    [contact] = contact_repository.get_all()

    assert contact.company is None
    assert contact.country is None


# Filtering

@pytest.fixture
def filter_data(seed):
    acme = seed.company("Acme")
    beta = seed.company("Beta")
    germany = seed.country("Germany")
    france = seed.country("France")
    return {
        "acme": acme,
        "beta": beta,
        "germany": germany,
        "france": france,
        "anna": seed.contact("Anna", acme, germany),
        "ben": seed.contact("Ben", acme, france),
        "carl": seed.contact("Carl", beta, germany),
    }


def test_filter_by_company_only_ignores_country(contact_repository, filter_data):
    contacts = contact_repository.filter_by_company_and_country(company_id=filter_data["acme"], country_id=None)

    assert [c.contact_id for c in contacts] == [filter_data["anna"], filter_data["ben"]]
    assert {c.company_id for c in contacts} == {filter_data["acme"]}


def test_filter_by_country_only(contact_repository, filter_data):
    contacts = contact_repository.filter_by_company_and_country(country_id=filter_data["germany"])

    assert [c.contact_id for c in contacts] == [filter_data["anna"], filter_data["carl"]]


def test_filter_by_both_is_a_logical_and(contact_repository, filter_data):
    contacts = contact_repository.filter_by_company_and_country(
        company_id=filter_data["acme"], country_id=filter_data["france"]
    )

    assert [c.contact_id for c in contacts] == [filter_data["ben"]]


def test_filter_without_filters_returns_everything(contact_repository, filter_data):
    assert len(contact_repository.filter_by_company_and_country()) == 3


def test_filter_with_unknown_company_raises_not_found(contact_repository, filter_data):
    with pytest.raises(NotFoundError) as exc_info:
        contact_repository.filter_by_company_and_country(company_id=404)

    assert exc_info.value.entity == "Company"


def test_filter_with_unknown_country_raises_not_found(contact_repository, filter_data):
    with pytest.raises(NotFoundError) as exc_info:
        contact_repository.filter_by_company_and_country(country_id=404)

    assert exc_info.value.entity == "Country"


# Pagination

@pytest.fixture
def five_companies(seed):
    return [seed.company(name) for name in ("Acme", "Beta", "Gamma", "Delta", "Epsilon")]


def test_first_page_holds_page_size_rows_in_stable_order(company_repository, five_companies):
    page = company_repository.get_page(1, 2)

    assert [company.company_id for company in page] == five_companies[:2]


def test_last_page_holds_the_remainder(company_repository, five_companies):
    page = company_repository.get_page(3, 2)

    assert [company.company_name for company in page] == ["Epsilon"]


def test_total_count_drives_total_pages(company_repository, five_companies):
    total = company_repository.get_total_count()

    assert total == 5
    assert math.ceil(total / 2) == 3


def test_page_past_the_end_is_empty(company_repository, five_companies):
    assert company_repository.get_page(4, 2) == []


@pytest.mark.parametrize("page_number, page_size, fields", [
    (0, 2, {"pageNumber"}),
    (1, 0, {"pageSize"}),
    (-1, -1, {"pageNumber", "pageSize"}),
])
def test_invalid_page_arguments_are_rejected(company_repository, five_companies, page_number, page_size, fields):
    with pytest.raises(ValidationError) as exc_info:
        company_repository.get_page(page_number, page_size)

    assert {failure.field for failure in exc_info.value.failures} == fields


# Statistics

def test_company_statistics_by_country(country_repository, seed):
    acme = seed.company("Acme")
    beta = seed.company("Beta")
    germany = seed.country("Germany")
    france = seed.country("France")
    seed.contact("Anna", acme, germany)
    seed.contact("Ben", acme, germany)
    seed.contact("Carl", beta, germany)
    seed.contact("Dora", beta, france)

    assert country_repository.get_company_statistics_by_country(germany) == {"Acme": 2, "Beta": 1}


def test_statistics_for_country_without_contacts_is_empty(country_repository, seed):
    empty = seed.country("Iceland")

    assert country_repository.get_company_statistics_by_country(empty) == {}


def test_statistics_for_unknown_country_is_empty(country_repository):
    assert country_repository.get_company_statistics_by_country(12345) == {}


def test_statistics_merge_companies_sharing_a_name(country_repository, seed):
    germany = seed.country("Germany")
    seed.contact("Anna", seed.company("Acme"), germany)
    seed.contact("Ben", seed.company("Acme"), germany)

    assert country_repository.get_company_statistics_by_country(germany) == {"Acme": 2}


# Ids beyond the 64-bit key range

TOO_LARGE_ID = 2 ** 63


def test_ids_beyond_key_range_are_not_found(company_repository, seed):
    seed.company("Acme")

    with pytest.raises(NotFoundError):
        company_repository.get(TOO_LARGE_ID)
    with pytest.raises(NotFoundError):
        company_repository.delete(TOO_LARGE_ID)
    with pytest.raises(NotFoundError):
        company_repository.save(Company(company_id=TOO_LARGE_ID, company_name="Ghost Ltd"))

    assert [c.company_name for c in company_repository.get_all()] == ["Acme"]


def test_contact_referencing_id_beyond_key_range_is_rejected(contact_repository, seed):
    country_id = seed.country("Germany")

    with pytest.raises(NotFoundError) as excinfo:
        contact_repository.save(Contact(contact_name="Anna", company_id=TOO_LARGE_ID, country_id=country_id))

    assert excinfo.value.entity == "Company"
    assert contact_repository.get_all() == []


def test_filter_and_statistics_with_id_beyond_key_range(contact_repository, country_repository):
    with pytest.raises(NotFoundError):
        contact_repository.filter_by_company_and_country(country_id=TOO_LARGE_ID)

    assert country_repository.get_company_statistics_by_country(TOO_LARGE_ID) == {}


def test_page_beyond_key_range_is_empty(company_repository, five_companies):
    assert company_repository.get_page(TOO_LARGE_ID, 2) == []
