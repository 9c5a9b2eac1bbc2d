"""Banking customer holding references to their accounts"""

from typing import List
from pydantic import Field, PrivateAttr, field_validator
from bank_bistro.models.base import Entity
from bank_bistro.models.transaction import Transaction
from bank_bistro.utils.errors import ValidationError
from bank_bistro.utils.logging import get_logger
from .accounts import BankAccount

logger = get_logger(__name__)


class BankCustomer(Entity):
    """Bank customer; accounts are shared references, never copies"""

    name: str = Field(..., strict=True, description="Customer name")
    email: str = Field(..., strict=True, description="Contact email")
    phone: str = Field(..., strict=True, description="Contact phone number")

    _accounts: List[BankAccount] = PrivateAttr(default_factory=list)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name must be a non-empty string")
        return value

    @property
    def accounts(self) -> List[BankAccount]:
        return list(self._accounts)

    def add_account(self, account: BankAccount) -> BankAccount:
        """
        Attach an account to this customer

        Raises:
            ValidationError: If account is not a bank account
        """
        if not isinstance(account, BankAccount):
            raise ValidationError("Account must be a bank account instance", field="account")
        self._accounts.append(account)
        logger.debug("Account added", customer=self.name, account_number=account.account_number)
        return account

    def view_accounts(self) -> List[BankAccount]:
        return list(self._accounts)

    def view_transaction_history(self, account_number: str) -> List[Transaction]:
        """
        Transaction history of one of this customer's accounts

        Args:
            account_number: Identifier of an owned account

        Returns:
            Copy of the account's transactions, oldest first

        Raises:
            ValidationError: If the customer holds no such account
        """
        for account in self._accounts:
            if account.account_number == account_number:
                return account.transactions
        raise ValidationError(f"Account not found: {account_number}", field="account_number")
