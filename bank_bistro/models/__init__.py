"""Data models for bank-bistro"""

from .base import Entity, Record
from .transaction import Transaction
from .summary import OrderLine, OrderSummary, DiscountQuote

__all__ = ["Entity", "Record", "Transaction", "OrderLine", "OrderSummary", "DiscountQuote"]
