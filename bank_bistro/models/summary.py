"""Order summary and discount quote models"""

from pydantic import Field
from datetime import datetime
from typing import Tuple
from .base import Record


class OrderLine(Record):
    """One distinct dish of an order"""

    name: str = Field(..., description="Dish display name")
    price: float = Field(..., gt=0, description="Unit price at summary time")
    quantity: int = Field(..., gt=0, description="Accumulated quantity")
    subtotal: float = Field(..., description="price * quantity, unrounded")


class OrderSummary(Record):
    """Snapshot of an order"""

    customer: str = Field(..., description="Customer name")
    items: Tuple[OrderLine, ...] = Field(default_factory=tuple, description="Lines in insertion order")
    total: float = Field(..., ge=0, description="Sum of subtotals rounded to 2 decimals")
    created_at: datetime = Field(..., description="Order creation timestamp")


class DiscountQuote(Record):
    """Display-only discount computed when an order is placed"""

    customer: str = Field(..., description="Customer name")
    percent: float = Field(..., ge=0, description="Bulk tier plus loyalty bonus")
    loyal: bool = Field(..., description="Whether the loyalty bonus applied")
    original_total: float = Field(..., ge=0, description="Order total, unchanged by the quote")
    discount_amount: float = Field(..., ge=0, description="Amount the discount would take off")
    discounted_total: float = Field(..., ge=0, description="Total after the quoted discount")
    created_at: datetime = Field(default_factory=datetime.now, description="Quote timestamp")
