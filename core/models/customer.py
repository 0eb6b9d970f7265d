# =============================================================================
# core/models/customer.py - Customer Schemas
# =============================================================================
# These models define the API contract for customer operations:
# - CustomerCreate: Input for POST /customers (all three fields required)
# - CustomerUpdate: Input for PUT /customers/{id} (any subset)
# - Customer: Output for every successful read or write
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_FIELDS = ("name", "email", "document")


class CustomerCreate(BaseModel):
    """
    Schema for creating a customer.

    Fields are optional at the schema level so that a missing field is
    reported as "Missing required fields" rather than a validation error.
    Any falsy value ("", 0, false, [], null) is treated as missing.

    Example:
        {
            "name": "Ada",
            "email": "ada@x.com",
            "document": "123"
        }
    """

    name: str | None = Field(default=None, description="Customer name")
    email: str | None = Field(default=None, description="Contact email")
    document: str | None = Field(default=None, description="Tax or identity number")

    @field_validator("name", "email", "document", mode="before")
    @classmethod
    def falsy_to_none(cls, value: Any) -> Any:
        return value or None

    def missing_fields(self) -> list[str]:
        """Names of required fields that were absent or falsy."""
        return [field for field in REQUIRED_FIELDS if getattr(self, field) is None]


class CustomerUpdate(BaseModel):
    """
    Schema for updating a customer.

    Only supplied, non-null fields are written; everything else keeps its
    stored value.

    Example:
        {
            "name": "Ada L."
        }
    """

    name: str | None = Field(default=None, description="New customer name")
    email: str | None = Field(default=None, description="New contact email")
    document: str | None = Field(default=None, description="New tax or identity number")

    def changes(self) -> dict[str, str]:
        """Fields to write, with omitted and null fields dropped."""
        return self.model_dump(exclude_none=True)


class Customer(BaseModel):
    """
    Schema for returning customer data to clients.

    Returned by every successful list, get, create and update call.

    Example:
        {
            "id": 1,
            "name": "Ada",
            "email": "ada@x.com",
            "document": "123"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Database-generated identifier")
    name: str
    email: str
    document: str
