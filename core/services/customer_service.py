# =============================================================================
# core/services/customer_service.py - Customer Business Logic
# =============================================================================
# Handles customer CRUD operations and business logic.
# Separates HTTP concerns from database/business logic.
#
# Every operation either returns its payload or raises one of the typed
# errors from app.exceptions; the API layer maps those to status codes.
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError

from app.exceptions import CustomerNotFoundError, InvalidRequestBodyError, MissingRequiredFieldsError
from core.models.customer import Customer, CustomerCreate, CustomerUpdate
from core.repositories.customer_repository import CustomerRepository
from lib.database import RecordNotFoundError
from lib.utils import parse_customer_id

logger = logging.getLogger(__name__)


class CustomerService:
    """
    Service for customer management operations.

    Provides a clean interface between API routes and the repository.
    The repository is passed in at construction, so the same service runs
    against the database or an in-memory test double.
    """

    def __init__(self, repository: CustomerRepository):
        self._repository = repository

    async def list_customers(self) -> list[Customer]:
        """Return every customer, ordered by id."""
        return await self._repository.find_all()

    async def get_customer(self, raw_id: str) -> Customer:
        """
        Get a customer by its path id.

        Args:
            raw_id: The id as it appeared in the URL

        Returns:
            The matching customer

        Raises:
            CustomerNotFoundError: If the id doesn't parse or has no record
        """
        customer_id = parse_customer_id(raw_id)
        customer = None
        if customer_id is not None:
            customer = await self._repository.find_by_id(customer_id)

        if customer is None:
            logger.debug(f"Customer lookup missed: {raw_id!r}")
            raise CustomerNotFoundError(raw_id)

        return customer

    async def create_customer(self, payload: CustomerCreate | None) -> Customer:
        """
        Create a customer.

        Args:
            payload: Request body; None is treated as an empty body

        Returns:
            Created customer including its generated id

        Raises:
            MissingRequiredFieldsError: If name, email or document is missing
        """
        payload = payload or CustomerCreate()

        missing = payload.missing_fields()
        if missing:
            raise MissingRequiredFieldsError(missing)

        customer = await self._repository.create(payload.model_dump())
        logger.info(f"Created customer: {customer.id}")
        return customer

    async def update_customer(self, raw_id: str, payload: CustomerUpdate | Any) -> Customer:
        """
        Update a customer.

        Only fields present in the payload are changed.

        Args:
            raw_id: The id as it appeared in the URL
            payload: Fields to change, as a CustomerUpdate or the raw JSON
                body; None changes nothing

        Returns:
            Updated customer

        Raises:
            CustomerNotFoundError: If the customer doesn't exist
            InvalidRequestBodyError: If the body has the wrong shape or types
        """
        # Existence is checked before the body is looked at
        customer = await self.get_customer(raw_id)

        changes = _parse_update(payload).changes()
        if not changes:
            return customer  # Nothing to update

        try:
            updated = await self._repository.update(customer.id, changes)
        except RecordNotFoundError:
            # Deleted between the lookup and the write
            raise CustomerNotFoundError(raw_id)

        logger.info(f"Updated customer: {customer.id} fields={sorted(changes)}")
        return updated

    async def delete_customer(self, raw_id: str) -> None:
        """
        Delete a customer.

        Raises:
            CustomerNotFoundError: If the customer doesn't exist
        """
        customer = await self.get_customer(raw_id)

        try:
            await self._repository.delete(customer.id)
        except RecordNotFoundError:
            raise CustomerNotFoundError(raw_id)

        logger.info(f"Deleted customer: {customer.id}")


def _parse_update(payload: CustomerUpdate | Any) -> CustomerUpdate:
    if payload is None:
        return CustomerUpdate()
    if isinstance(payload, CustomerUpdate):
        return payload

    try:
        return CustomerUpdate.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequestBodyError(e.errors(include_url=False))
