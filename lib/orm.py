# =============================================================================
# lib/orm.py - SQLAlchemy Table Definitions
# =============================================================================
# Declarative ORM mapping for the customers table.
# =============================================================================

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base shared by all tables."""


class CustomerRecord(Base):
    """
    Row in the customers table.

    Email carries no unique constraint.
    """

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(), nullable=False)
    email: Mapped[str] = mapped_column(String(), nullable=False)
    document: Mapped[str] = mapped_column(String(), nullable=False)

    def __repr__(self) -> str:
        return f"CustomerRecord(id={self.id!r}, name={self.name!r})"
