"""Constants and enums for bank-bistro"""

from enum import Enum


class TransactionType(str, Enum):
    """Account history record types"""
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER_OUT = "TRANSFER_OUT"
    TRANSFER_IN = "TRANSFER_IN"


class AccountKind(str, Enum):
    """Bank account variants"""
    INDIVIDUAL = "individual"
    JOINT = "joint"


class DishCategory(str, Enum):
    """Dish categories, one menu per category"""
    APPETIZER = "appetizer"
    ENTREE = "entree"
    DESSERT = "dessert"


# Account rules
MIN_ACCOUNT_NUMBER_LENGTH = 10
MIN_JOINT_ACCOUNT_OWNERS = 1

# Dish rules
DESSERT_PRICE_CEILING = 15.0
DEFAULT_PREP_TIME_MINUTES = 15
PRICE_DECIMALS = 2

# Pricing and discount defaults (overridable from config/settings.yaml)
DEFAULT_DEMAND_PRICING_PERCENT = 10
DEFAULT_DISCOUNT_TIERS = [
    {'min_total': 50, 'percent': 10},
    {'min_total': 30, 'percent': 5},
]
DEFAULT_LOYALTY_BONUS_PERCENT = 5
DEFAULT_LOYALTY_MIN_ORDERS = 3
