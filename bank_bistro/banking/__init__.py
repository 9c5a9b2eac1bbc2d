"""Banking domain: accounts, transfers, transaction history"""

from .accounts import (
    Account,
    BankAccount,
    IndividualAccount,
    JointAccount,
    open_account
)
from .customer import BankCustomer

__all__ = [
    "Account",
    "BankAccount",
    "IndividualAccount",
    "JointAccount",
    "open_account",
    "BankCustomer"
]
