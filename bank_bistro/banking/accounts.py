"""Bank accounts: balance bookkeeping and transaction history"""

from abc import abstractmethod
from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from pydantic import Field, PrivateAttr, field_validator
from bank_bistro.constants import (
    AccountKind,
    TransactionType,
    MIN_ACCOUNT_NUMBER_LENGTH,
    MIN_JOINT_ACCOUNT_OWNERS
)
from bank_bistro.models.base import Entity
from bank_bistro.models.transaction import Transaction
from bank_bistro.utils.errors import (
    ValidationError,
    InsufficientFundsError,
    InvalidTransactionError
)
from bank_bistro.utils.logging import get_logger
from bank_bistro.utils.metrics import transactions_recorded, transfers_rejected

logger = get_logger(__name__)


def require_positive_amount(amount: Any, operation: str) -> float:
    """
    Check that an amount is a real number strictly above zero

    Args:
        amount: Value supplied by the caller
        operation: Operation name used in the error message

    Returns:
        The amount, unchanged

    Raises:
        ValidationError: If amount is not a number or is <= 0
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise ValidationError(f"{operation} amount must be a number", field="amount")
    if amount <= 0:
        raise ValidationError(f"{operation} amount must be greater than zero", field="amount")
    return amount


class BankAccount(Entity):
    """
    Common account behaviour shared by every account kind.

    Only the concrete kinds (IndividualAccount, JointAccount) can be created.
    The balance and the history are private; they change only through
    deposit, withdraw and transfer_funds.
    """

    account_number: str = Field(..., strict=True, frozen=True, description="Account identifier")
    initial_balance: float = Field(0, ge=0, strict=True, description="Opening balance")

    _balance: float = PrivateAttr(default=0)
    _transactions: List[Transaction] = PrivateAttr(default_factory=list)

    @field_validator("account_number")
    @classmethod
    def _check_account_number(cls, value: str) -> str:
        if len(value) < MIN_ACCOUNT_NUMBER_LENGTH:
            raise ValueError(
                f"Account number must be at least {MIN_ACCOUNT_NUMBER_LENGTH} characters"
            )
        return value

    def model_post_init(self, __context: Any) -> None:
        self._balance = self.initial_balance

    @abstractmethod
    def describe(self) -> Dict[str, Any]:
        """Summary of the account for listings"""

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def transactions(self) -> List[Transaction]:
        """Copy of the transaction history, oldest first"""
        return list(self._transactions)

    def get_balance(self) -> float:
        return self._balance

    def _append(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
        transactions_recorded.labels(transaction_type=transaction.transaction_type.value).inc()

    def _check_funds(self, amount: float) -> None:
        if amount > self._balance:
            raise InsufficientFundsError(
                f"Insufficient funds in {self.account_number}: "
                f"requested {amount}, available {self._balance}",
                field="amount"
            )

    def deposit(self, amount: float) -> float:
        """
        Add funds to the account

        Args:
            amount: Amount to deposit, must be > 0

        Returns:
            New balance

        Raises:
            ValidationError: If amount is not a positive number
        """
        require_positive_amount(amount, "Deposit")

        transaction = Transaction(
            account_number=self.account_number,
            amount=amount,
            transaction_type=TransactionType.DEPOSIT,
            to_account=self.account_number
        )
        self._balance += amount
        self._append(transaction)

        logger.debug("Deposit recorded", account_number=self.account_number, amount=amount)
        return self._balance

    def withdraw(self, amount: float) -> float:
        """
        Take funds out of the account

        Args:
            amount: Amount to withdraw, must be > 0 and <= balance

        Returns:
            New balance

        Raises:
            ValidationError: If amount is not a positive number
            InsufficientFundsError: If amount exceeds the balance
        """
        require_positive_amount(amount, "Withdrawal")
        self._check_funds(amount)

        transaction = Transaction(
            account_number=self.account_number,
            amount=amount,
            transaction_type=TransactionType.WITHDRAW,
            from_account=self.account_number
        )
        self._balance -= amount
        self._append(transaction)

        logger.debug("Withdrawal recorded", account_number=self.account_number, amount=amount)
        return self._balance

    def transfer_funds(self, target: "BankAccount", amount: float) -> float:
        """
        Move funds from this account to another one.

        Runs a withdrawal here and a deposit on the target, then adds the
        TRANSFER_OUT and TRANSFER_IN records. Target, amount and funds are
        checked first, so a rejected transfer changes nothing.

        Args:
            target: Receiving account
            amount: Amount to move, must be > 0 and <= balance

        Returns:
            New balance of this account

        Raises:
            InvalidTransactionError: If target is not an account or is this account
            ValidationError: If amount is not a positive number
            InsufficientFundsError: If amount exceeds the balance
        """
        if not isinstance(target, BankAccount):
            transfers_rejected.labels(reason="invalid_target").inc()
            raise InvalidTransactionError("Transfer target must be a bank account", field="target")
        if target is self:
            transfers_rejected.labels(reason="same_account").inc()
            raise InvalidTransactionError("Cannot transfer to the same account", field="target")

        try:
            require_positive_amount(amount, "Transfer")
            self._check_funds(amount)
        except (ValidationError, InsufficientFundsError) as e:
            transfers_rejected.labels(reason=e.kind).inc()
            raise

        self.withdraw(amount)
        target.deposit(amount)

        outgoing = Transaction(
            account_number=self.account_number,
            amount=amount,
            transaction_type=TransactionType.TRANSFER_OUT,
            from_account=self.account_number,
            to_account=target.account_number
        )
        incoming = Transaction(
            account_number=target.account_number,
            amount=amount,
            transaction_type=TransactionType.TRANSFER_IN,
            from_account=self.account_number,
            to_account=target.account_number
        )

        self._append(outgoing)
        target._append(incoming)

        logger.info(
            "Transfer completed",
            from_account=self.account_number,
            to_account=target.account_number,
            amount=amount
        )
        return self._balance


class IndividualAccount(BankAccount):
    """Account held by a single customer"""

    kind: Literal[AccountKind.INDIVIDUAL] = AccountKind.INDIVIDUAL

    def describe(self) -> Dict[str, Any]:
        return {
            "kind": AccountKind(self.kind).value,
            "account_number": self.account_number,
            "balance": self.balance,
        }


class JointAccount(BankAccount):
    """Account shared by several owners"""

    kind: Literal[AccountKind.JOINT] = AccountKind.JOINT
    owners: List[str] = Field(default_factory=list, description="Owner names")

    @field_validator("owners")
    @classmethod
    def _check_owners(cls, value: List[str]) -> List[str]:
        if len(value) < MIN_JOINT_ACCOUNT_OWNERS:
            raise ValueError(f"Joint account needs at least {MIN_JOINT_ACCOUNT_OWNERS} owner(s)")
        if any(not owner.strip() for owner in value):
            raise ValueError("Owner names must be non-empty")
        return value

    def describe(self) -> Dict[str, Any]:
        return {
            "kind": AccountKind(self.kind).value,
            "account_number": self.account_number,
            "balance": self.balance,
            "owners": list(self.owners),
        }


Account = Annotated[Union[IndividualAccount, JointAccount], Field(discriminator="kind")]

ACCOUNT_TYPES = {
    AccountKind.INDIVIDUAL: IndividualAccount,
    AccountKind.JOINT: JointAccount,
}


def open_account(data: Dict[str, Any]) -> Account:
    """
    Create an account of the kind named in data['kind']

    Args:
        data: Account fields, e.g. {"kind": "joint", "account_number": ..., "owners": [...]}

    Returns:
        The new account

    Raises:
        ValidationError: If the kind is unknown or a field is invalid
    """
    fields = dict(data)
    raw_kind: Optional[Any] = fields.pop("kind", AccountKind.INDIVIDUAL)
    try:
        kind = AccountKind(raw_kind)
    except ValueError:
        raise ValidationError(f"Unknown account kind: {raw_kind}", field="kind")
    return ACCOUNT_TYPES[kind](**fields)
