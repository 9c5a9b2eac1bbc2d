"""Custom exceptions for bank-bistro"""

from typing import Optional


class BankBistroError(Exception):
    """Base exception for bank-bistro domain errors"""

    kind = "error"

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class ValidationError(BankBistroError):
    """Malformed or out-of-range input"""
    kind = "validation"


class InsufficientFundsError(BankBistroError):
    """Withdrawal or transfer exceeds available balance"""
    kind = "insufficient_funds"


class InvalidTransactionError(BankBistroError):
    """Transfer target is not a valid account"""
    kind = "invalid_transaction"


class InvalidOrderError(BankBistroError):
    """Malformed order input"""
    kind = "invalid_order"


class DishNotFoundError(BankBistroError):
    """Dish lookup miss in a menu"""
    kind = "dish_not_found"


class ConfigurationError(BankBistroError):
    """Configuration loading errors"""
    kind = "configuration"
