"""
SQL Contact Repository
======================

Concrete implementation of ContactRepository using SQLAlchemy.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from contact_management.domain.models.company import Company
from contact_management.domain.models.contact import Contact
from contact_management.domain.models.country import Country
from contact_management.domain.repositories.contact_repository import ContactRepository
from contact_management.infrastructure.db.orm_models import CompanyRecord, ContactRecord, CountryRecord
from contact_management.infrastructure.db.sql_repository import SqlRepository


class SqlContactRepository(SqlRepository[Contact], ContactRepository):
    """SQLAlchemy implementation of ContactRepository."""

    record_type = ContactRecord
    id_attribute = "contact_id"
    entity_name = "Contact"

    def _to_entity(self, record: ContactRecord, include_related: bool = False) -> Contact:
        contact = Contact(
            contact_id=record.contact_id,
            contact_name=record.contact_name,
            company_id=record.company_id,
            country_id=record.country_id,
        )
        if include_related:
            contact.company = Company(
                company_id=record.company.company_id,
                company_name=record.company.company_name,
            )
            contact.country = Country(
                country_id=record.country.country_id,
                country_name=record.country.country_name,
            )
        return contact

    def _apply(self, entity: Contact, record: ContactRecord) -> None:
        record.contact_name = entity.contact_name
        record.company_id = entity.company_id
        record.country_id = entity.country_id

    def _check_references(self, session: Session, entity: Contact) -> None:
        # Company first, then country
        self._require(session, CompanyRecord, "Company", entity.company_id)
        self._require(session, CountryRecord, "Country", entity.country_id)

    def get_all_with_company_and_country(self) -> List[Contact]:
        """Get every contact with its company and country eagerly loaded."""
        query = (
            select(ContactRecord)
            .options(joinedload(ContactRecord.company), joinedload(ContactRecord.country))
            .order_by(ContactRecord.contact_id)
        )
        with self._database.session() as session:
            records = session.scalars(query).all()
            return [self._to_entity(record, include_related=True) for record in records]

    def filter_by_company_and_country(
        self,
        company_id: Optional[int] = None,
        country_id: Optional[int] = None,
    ) -> List[Contact]:
        """Filter contacts; unknown filter ids raise NotFoundError."""
        query = select(ContactRecord).order_by(ContactRecord.contact_id)

        with self._database.session() as session:
            if company_id is not None:
                self._require(session, CompanyRecord, "Company", company_id)
                query = query.where(ContactRecord.company_id == company_id)
            if country_id is not None:
                self._require(session, CountryRecord, "Country", country_id)
                query = query.where(ContactRecord.country_id == country_id)

            records = session.scalars(query).all()
            return [self._to_entity(record) for record in records]
