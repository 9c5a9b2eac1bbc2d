"""Utility modules"""

from .config_loader import load_config, save_config
from .errors import (
    BankBistroError,
    ValidationError,
    InsufficientFundsError,
    InvalidTransactionError,
    InvalidOrderError,
    DishNotFoundError,
    ConfigurationError
)

__all__ = [
    "load_config",
    "save_config",
    "BankBistroError",
    "ValidationError",
    "InsufficientFundsError",
    "InvalidTransactionError",
    "InvalidOrderError",
    "DishNotFoundError",
    "ConfigurationError"
]
