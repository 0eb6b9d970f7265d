# =============================================================================
# app/routers/customers.py - Customer CRUD Endpoints
# =============================================================================
# Handles listing, fetching, creating, updating and deleting customers.
# Error responses are produced by the handlers in app.exceptions.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path, Response, status

from app.dependencies import CustomerServiceDep
from core.models.customer import Customer, CustomerCreate

router = APIRouter()

# Path ids stay strings here; the service parses them so that a
# non-numeric id is reported as not found.
CustomerId = Annotated[str, Path(description="Customer id")]

NOT_FOUND = {
    404: {
        "description": "Customer not found",
        "content": {"application/json": {"example": {"error": "Customer not found"}}},
    }
}


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[Customer])
async def list_customers(service: CustomerServiceDep):
    """
    List all customers.

    Returns every stored customer ordered by id. No pagination.
    """
    return await service.list_customers()


@router.get("/{customer_id}", response_model=Customer, responses=NOT_FOUND)
async def get_customer(customer_id: CustomerId, service: CustomerServiceDep):
    """Get one customer by id."""
    return await service.get_customer(customer_id)


@router.post(
    "",
    response_model=Customer,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Missing required fields",
            "content": {"application/json": {"example": {"error": "Missing required fields"}}},
        }
    },
)
async def create_customer(
    service: CustomerServiceDep,
    request: CustomerCreate | None = None,
):
    """
    Create a customer.

    name, email and document are all required. Returns the stored customer
    with its generated id.
    """
    return await service.create_customer(request)


@router.put("/{customer_id}", response_model=Customer, responses=NOT_FOUND)
async def update_customer(
    customer_id: CustomerId,
    service: CustomerServiceDep,
    request: Annotated[Any, Body(description="Any subset of name, email and document")] = None,
):
    """
    Update a customer.

    Any subset of name, email and document may be sent. Omitted fields keep
    their current values. The body is validated only after the customer is
    found, so an unknown id is always a 404.
    """
    return await service.update_customer(customer_id, request)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_customer(customer_id: CustomerId, service: CustomerServiceDep):
    """Delete a customer. Returns an empty 204 on success."""
    await service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
