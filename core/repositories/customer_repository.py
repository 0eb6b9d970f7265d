# =============================================================================
# core/repositories/customer_repository.py - Customer Persistence
# =============================================================================
# Defines the persistence contract the service layer depends on, plus the
# SQLAlchemy implementation used in production.
#
# The service only ever sees CustomerRepository, so tests can pass any
# object with the same five coroutines.
# =============================================================================

import logging
from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.models.customer import Customer
from lib.database import RecordNotFoundError
from lib.orm import CustomerRecord

logger = logging.getLogger(__name__)


class CustomerRepository(Protocol):
    """Abstract store of customer records."""

    async def find_all(self) -> list[Customer]: ...

    async def find_by_id(self, customer_id: int) -> Customer | None: ...

    async def create(self, fields: dict[str, Any]) -> Customer: ...

    async def update(self, customer_id: int, fields: dict[str, Any]) -> Customer:
        """Raises RecordNotFoundError if the id is absent."""
        ...

    async def delete(self, customer_id: int) -> None:
        """Raises RecordNotFoundError if the id is absent."""
        ...


class SQLAlchemyCustomerRepository:
    """
    CustomerRepository backed by the customers table.

    Opens one AsyncSession per call. Writes run inside session.begin() so
    they commit on success and roll back on error.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def find_all(self) -> list[Customer]:
        async with self._session_factory() as session:
            result = await session.execute(select(CustomerRecord).order_by(CustomerRecord.id))
            return [Customer.model_validate(record) for record in result.scalars()]

    async def find_by_id(self, customer_id: int) -> Customer | None:
        async with self._session_factory() as session:
            record = await session.get(CustomerRecord, customer_id)
            return Customer.model_validate(record) if record else None

    async def create(self, fields: dict[str, Any]) -> Customer:
        async with self._session_factory() as session:
            async with session.begin():
                record = CustomerRecord(**fields)
                session.add(record)
            return Customer.model_validate(record)

    async def update(self, customer_id: int, fields: dict[str, Any]) -> Customer:
        async with self._session_factory() as session:
            async with session.begin():
                record = await session.get(CustomerRecord, customer_id)
                if record is None:
                    raise RecordNotFoundError(CustomerRecord.__tablename__, customer_id)

                for key, value in fields.items():
                    setattr(record, key, value)

            return Customer.model_validate(record)

    async def delete(self, customer_id: int) -> None:
        async with self._session_factory() as session:
            async with session.begin():
                record = await session.get(CustomerRecord, customer_id)
                if record is None:
                    raise RecordNotFoundError(CustomerRecord.__tablename__, customer_id)

                await session.delete(record)

        logger.debug(f"Deleted row {customer_id} from {CustomerRecord.__tablename__}")
