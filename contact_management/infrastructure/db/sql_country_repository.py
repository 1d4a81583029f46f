"""
SQL Country Repository
======================

Concrete implementation of CountryRepository using SQLAlchemy.
"""
from typing import Dict

from sqlalchemy import func, select

from contact_management.domain.models.country import Country
from contact_management.domain.repositories.country_repository import CountryRepository
from contact_management.infrastructure.db.orm_models import CompanyRecord, ContactRecord, CountryRecord
from contact_management.infrastructure.db.sql_repository import SqlRepository, fits_id


class SqlCountryRepository(SqlRepository[Country], CountryRepository):
    """SQLAlchemy implementation of CountryRepository."""

    record_type = CountryRecord
    id_attribute = "country_id"
    entity_name = "Country"

    def _to_entity(self, record: CountryRecord) -> Country:
        return Country(
            country_id=record.country_id,
            country_name=record.country_name,
        )

    def _apply(self, entity: Country, record: CountryRecord) -> None:
        record.country_name = entity.country_name

    def get_company_statistics_by_country(self, country_id: int) -> Dict[str, int]:
        """
        Count the country's contacts per company name.

        Companies that share a name are counted under that one name.
        """
        if not fits_id(country_id):
            return {}

        query = (
            select(CompanyRecord.company_name, func.count(ContactRecord.contact_id))
            .join(ContactRecord.company)
            .where(ContactRecord.country_id == country_id)
            .group_by(CompanyRecord.company_name)
            .order_by(CompanyRecord.company_name)
        )
        with self._database.session() as session:
            rows = session.execute(query).all()
        return {company_name: count for company_name, count in rows}
