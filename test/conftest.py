"""
Shared fixtures
---------------

Every test gets its own SQLite file so ids and rows never leak between
tests. Credentials are overridden to prove they come from configuration.
"""
import logging

import pytest
from fastapi.testclient import TestClient

from contact_management.core.config import Settings
from contact_management.di.container import DIContainer
from contact_management.domain.models.company import Company
from contact_management.domain.models.contact import Contact
from contact_management.domain.models.country import Country
from contact_management.domain.repositories.company_repository import CompanyRepository
from contact_management.domain.repositories.contact_repository import ContactRepository
from contact_management.domain.repositories.country_repository import CountryRepository
from contact_management.infrastructure.db.database import Database
from contact_management.main import create_application

TEST_USERNAME = "tester"
TEST_PASSWORD = "s3cret-password"


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'contacts.db'}")
    monkeypatch.setenv("AUTH_USERNAME", TEST_USERNAME)
    monkeypatch.setenv("AUTH_PASSWORD", TEST_PASSWORD)
    monkeypatch.setenv("JWT_ISSUER", "test-issuer")
    monkeypatch.setenv("JWT_AUDIENCE", "test-audience")
    monkeypatch.setenv("JWT_TTL_MINUTES", "60")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    return Settings()


@pytest.fixture
def container(settings):
    container = DIContainer(settings, logging.getLogger("contact_management.test"))
    database = container.get(Database)
    database.create_schema()
    yield container
    database.dispose()


@pytest.fixture
def company_repository(container) -> CompanyRepository:
    return container.get(CompanyRepository)


@pytest.fixture
def contact_repository(container) -> ContactRepository:
    return container.get(ContactRepository)


@pytest.fixture
def country_repository(container) -> CountryRepository:
    return container.get(CountryRepository)


@pytest.fixture
def seed(company_repository, country_repository, contact_repository):
    """Helpers creating rows and returning their ids."""

    class Seeder:
        def company(self, name: str) -> int:
            return company_repository.save(Company(company_name=name))

        def country(self, name: str) -> int:
            return country_repository.save(Country(country_name=name))

        def contact(self, name: str, company_id: int, country_id: int) -> int:
            return contact_repository.save(
                Contact(contact_name=name, company_id=company_id, country_id=country_id)
            )

    return Seeder()


@pytest.fixture
def client(settings):
    application = create_application(settings)
    with TestClient(application) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/v1/auth/login",
        json={"username": TEST_USERNAME, "password": TEST_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
