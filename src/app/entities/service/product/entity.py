"""Entity: Product."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.app.entities.core._base import Entity


class Product(Entity):
    """Product entity representing a catalog item.

    Removing a product never erases it; ``available`` is flipped to false and
    the row stays in the store as a tombstone.
    """

    name: str = Field(description="Product name")
    price: float = Field(description="Unit price")
    description: str | None = Field(default=None, description="Free-form description")
    available: bool = Field(default=True, description="False once the product is removed")

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.price == other.price
            and self.description == other.description
            and self.available == other.available
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.price,
            self.description,
            self.available,
        ))


class ProductCreate(BaseModel):
    """Fields accepted when creating a product."""

    name: str = Field(min_length=1, description="Product name")
    price: float = Field(ge=0, description="Unit price")
    description: str | None = Field(default=None, description="Free-form description")


class ProductUpdate(BaseModel):
    """Partial product update; only explicitly supplied fields are written."""

    name: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None

    @field_validator("name", "price")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # The columns are NOT NULL; omit the field instead of sending null
        if value is None:
            raise ValueError("may be omitted but not set to null")
        return value

    def changes(self) -> dict[str, Any]:
        """Return the fields the caller actually set."""
        return self.model_dump(exclude_unset=True)
