"""Order ORM — the `orders` table backing the SQL repository.

Invariants:
    - id is the text primary key: the uniqueness constraint that makes a
      duplicate create fail
    - Exactly three columns: id, item, quantity

Design Decisions:
    - No timestamps or surrogate keys: the table mirrors the wire shape
    - to_domain() is the only way rows leave the repository
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from orderflow.core.domain_types import Order, OrderId
from orderflow.db.base import Base


class OrderRecord(Base):
    """Row in the orders table."""
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    item: Mapped[str] = mapped_column(Text, nullable=False, default="")
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def to_domain(self) -> Order:
        return Order(id=OrderId(self.id), item=self.item, quantity=self.quantity)
