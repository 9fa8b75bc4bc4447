"""Order Schemas — wire shape {id, item, quantity} with field-level validation.

Invariants:
    - Field names are fixed: id, item, quantity
    - OrderCreate.id is optional; absent, null or blank (after strip) means
      "server assigns"
    - OrderUpdate carries no id: the path parameter is authoritative
    - quantity is an integer; no range enforced here

Design Decisions:
    - from_attributes on OrderResponse: built straight from the frozen Order dataclass
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderCreate(BaseModel):
    """Order creation input."""
    id: str = Field("", max_length=128)
    item: str
    quantity: int

    @field_validator("id", mode="before")
    @classmethod
    def null_id_is_blank(cls, v):
        return "" if v is None else v

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        return v.strip()


class OrderUpdate(BaseModel):
    """Full replacement of an order's attributes."""
    item: str
    quantity: int


class OrderResponse(BaseModel):
    """Order as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    item: str
    quantity: int
