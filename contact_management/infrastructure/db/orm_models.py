"""
ORM Models
==========

SQLAlchemy tables backing the domain models.
Contacts are removed together with their company or country, both by the
ORM relationship cascade and by ON DELETE CASCADE foreign keys.
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

NAME_MAX_LENGTH = 100


class CompanyRecord(Base):
    __tablename__ = "companies"

    company_id = Column(Integer, primary_key=True, autoincrement=True)
    company_name = Column(String(NAME_MAX_LENGTH), nullable=False)

    contacts = relationship(
        "ContactRecord",
        back_populates="company",
        cascade="all, delete-orphan",
    )


class CountryRecord(Base):
    __tablename__ = "countries"

    country_id = Column(Integer, primary_key=True, autoincrement=True)
    country_name = Column(String(NAME_MAX_LENGTH), nullable=False)

    contacts = relationship(
        "ContactRecord",
        back_populates="country",
        cascade="all, delete-orphan",
    )


class ContactRecord(Base):
    __tablename__ = "contacts"

    contact_id = Column(Integer, primary_key=True, autoincrement=True)
    contact_name = Column(String(NAME_MAX_LENGTH), nullable=False)
    company_id = Column(
        Integer,
        ForeignKey("companies.company_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    country_id = Column(
        Integer,
        ForeignKey("countries.country_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    company = relationship("CompanyRecord", back_populates="contacts")
    country = relationship("CountryRecord", back_populates="contacts")
