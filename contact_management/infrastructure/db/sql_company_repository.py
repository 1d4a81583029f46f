"""
SQL Company Repository
======================

Concrete implementation of CompanyRepository using SQLAlchemy.
"""
from typing import List

from sqlalchemy import func, select

from contact_management.domain.constants.company_fields import CompanyFields
from contact_management.domain.exceptions import ValidationError, ValidationFailure
from contact_management.domain.models.company import Company
from contact_management.domain.repositories.company_repository import CompanyRepository
from contact_management.infrastructure.db.orm_models import CompanyRecord
from contact_management.infrastructure.db.sql_repository import MAX_ID, SqlRepository


class SqlCompanyRepository(SqlRepository[Company], CompanyRepository):
    """SQLAlchemy implementation of CompanyRepository."""

    record_type = CompanyRecord
    id_attribute = "company_id"
    entity_name = "Company"

    def _to_entity(self, record: CompanyRecord) -> Company:
        return Company(
            company_id=record.company_id,
            company_name=record.company_name,
        )

    def _apply(self, entity: Company, record: CompanyRecord) -> None:
        record.company_name = entity.company_name

    def get_page(self, page_number: int, page_size: int) -> List[Company]:
        """Get one page of companies in primary key order."""
        failures = []
        if page_number < 1:
            failures.append(ValidationFailure(CompanyFields.PAGE_NUMBER, "Page number must be at least 1."))
        if page_size < 1:
            failures.append(ValidationFailure(CompanyFields.PAGE_SIZE, "Page size must be at least 1."))
        if failures:
            raise ValidationError(failures)

        offset = (page_number - 1) * page_size
        if offset > MAX_ID:
            return []

        with self._database.session() as session:
            records = session.scalars(
                select(CompanyRecord)
                .order_by(CompanyRecord.company_id)
                .offset(offset)
                .limit(min(page_size, MAX_ID))
            ).all()
            return [self._to_entity(record) for record in records]

    def get_total_count(self) -> int:
        """Count all companies."""
        with self._database.session() as session:
            return session.scalar(select(func.count()).select_from(CompanyRecord)) or 0
