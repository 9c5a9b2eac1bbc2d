"""Restaurant customer with validated contact details and order history"""

import re
from typing import Any, List, TYPE_CHECKING
from pydantic import Field, PrivateAttr, field_validator
from bank_bistro.constants import DEFAULT_LOYALTY_MIN_ORDERS
from bank_bistro.models.base import Entity
from bank_bistro.models.summary import OrderSummary
from bank_bistro.utils.errors import InvalidOrderError

if TYPE_CHECKING:
    from .order import Order

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\d{10}$")


class Customer(Entity):
    """Restaurant customer"""

    name: str = Field(..., strict=True, description="Customer name")
    contact_info: str = Field(..., strict=True, description="Email address or 10-digit phone number")

    _order_history: List[Any] = PrivateAttr(default_factory=list)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name must be a non-empty string")
        return value

    @field_validator("contact_info")
    @classmethod
    def _check_contact(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value) and not PHONE_PATTERN.match(value):
            raise ValueError("Contact info must be a valid email or 10-digit phone number")
        return value

    @property
    def order_history(self) -> List["Order"]:
        return list(self._order_history)

    def rename(self, name: str) -> None:
        self.name = name

    def update_contact(self, contact_info: str) -> None:
        self.contact_info = contact_info

    def place_order(self, order: "Order") -> None:
        """
        Record an order into this customer's history

        Raises:
            InvalidOrderError: If order is not an Order
        """
        from .order import Order

        if not isinstance(order, Order):
            raise InvalidOrderError("Must be a valid Order instance", field="order")
        self._order_history.append(order)

    def view_order_history(self) -> List[OrderSummary]:
        return [order.view_summary() for order in self._order_history]

    def is_loyal_customer(self, threshold: int = DEFAULT_LOYALTY_MIN_ORDERS) -> bool:
        return len(self._order_history) >= threshold
