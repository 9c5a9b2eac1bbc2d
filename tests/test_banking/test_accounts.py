"""Unit tests for bank accounts and transfers"""

import pytest
from prometheus_client import REGISTRY
from bank_bistro.banking import BankAccount, IndividualAccount, JointAccount, open_account
from bank_bistro.constants import AccountKind, TransactionType
from bank_bistro.utils.errors import (
    ValidationError,
    InsufficientFundsError,
    InvalidTransactionError
)


@pytest.fixture
def account_a():
    return IndividualAccount(account_number="145xs6s51s51x5ssx1", initial_balance=1000)


@pytest.fixture
def account_b():
    return IndividualAccount(account_number="AramAccount1234", initial_balance=300)


def test_account_starts_with_initial_balance(account_a):
    assert account_a.balance == 1000
    assert account_a.get_balance() == 1000
    assert account_a.transactions == []


def test_initial_balance_defaults_to_zero():
    account = IndividualAccount(account_number="0000000000")
    assert account.balance == 0


@pytest.mark.parametrize("account_number", ["short", "123456789", ""])
def test_account_number_too_short(account_number):
    with pytest.raises(ValidationError) as exc_info:
        IndividualAccount(account_number=account_number)
    assert "at least 10" in exc_info.value.message
    assert exc_info.value.field == "account_number"


def test_account_number_must_be_string():
    with pytest.raises(ValidationError):
        IndividualAccount(account_number=12345678901)


@pytest.mark.parametrize("initial_balance", [-1, -0.01, "100"])
def test_invalid_initial_balance(initial_balance):
    with pytest.raises(ValidationError):
        IndividualAccount(account_number="1234567890", initial_balance=initial_balance)


def test_account_number_cannot_be_reassigned(account_a):
    with pytest.raises(ValidationError):
        account_a.account_number = "9999999999"
    assert account_a.account_number == "145xs6s51s51x5ssx1"


def test_base_account_cannot_be_created():
    with pytest.raises(TypeError):
        BankAccount(account_number="1234567890")


def test_deposit_increases_balance_and_records(account_a):
    new_balance = account_a.deposit(250.5)

    assert new_balance == 1250.5
    assert account_a.balance == 1250.5
    assert len(account_a.transactions) == 1

    tx = account_a.transactions[0]
    assert tx.transaction_type == TransactionType.DEPOSIT
    assert tx.amount == 250.5
    assert tx.account_number == account_a.account_number
    assert tx.to_account == account_a.account_number
    assert tx.from_account is None


@pytest.mark.parametrize("amount", [0, -10, "50", None, True])
def test_deposit_rejects_bad_amounts(account_a, amount):
    with pytest.raises(ValidationError):
        account_a.deposit(amount)
    assert account_a.balance == 1000
    assert account_a.transactions == []


def test_withdraw_decreases_balance_and_records(account_a):
    assert account_a.withdraw(400) == 600

    tx = account_a.transactions[-1]
    assert tx.transaction_type == TransactionType.WITHDRAW
    assert tx.from_account == account_a.account_number
    assert tx.to_account is None


def test_withdraw_entire_balance(account_a):
    assert account_a.withdraw(1000) == 0


def test_withdraw_more_than_balance_changes_nothing(account_a):
    account_a.deposit(10)
    history_before = account_a.transactions

    with pytest.raises(InsufficientFundsError):
        account_a.withdraw(1010.01)

    assert account_a.balance == 1010
    assert account_a.transactions == history_before


def test_withdraw_rejects_non_positive(account_a):
    with pytest.raises(ValidationError):
        account_a.withdraw(0)


def test_transactions_returns_copy(account_a):
    account_a.deposit(1)
    history = account_a.transactions
    history.clear()
    assert len(account_a.transactions) == 1


def test_transaction_records_are_immutable(account_a):
    account_a.deposit(5)
    tx = account_a.transactions[0]
    with pytest.raises(ValidationError):
        tx.amount = 500
    assert tx.amount == 5


def test_transfer_moves_funds(account_a, account_b):
    account_a.transfer_funds(account_b, 100)

    assert account_a.balance == 900
    assert account_b.balance == 400

    outgoing = account_a.transactions[-1]
    assert outgoing.transaction_type == TransactionType.TRANSFER_OUT
    assert outgoing.amount == 100
    assert outgoing.from_account == account_a.account_number
    assert outgoing.to_account == account_b.account_number

    incoming = account_b.transactions[-1]
    assert incoming.transaction_type == TransactionType.TRANSFER_IN
    assert incoming.amount == 100
    assert incoming.account_number == account_b.account_number
    assert incoming.from_account == account_a.account_number
    assert incoming.to_account == account_b.account_number


def test_transfer_records_movement_then_transfer(account_a, account_b):
    account_a.transfer_funds(account_b, 100)
    assert [tx.transaction_type for tx in account_a.transactions] == [
        TransactionType.WITHDRAW,
        TransactionType.TRANSFER_OUT,
    ]
    assert [tx.transaction_type for tx in account_b.transactions] == [
        TransactionType.DEPOSIT,
        TransactionType.TRANSFER_IN,
    ]


def test_transfer_insufficient_funds_is_all_or_nothing(account_a, account_b):
    with pytest.raises(InsufficientFundsError):
        account_b.transfer_funds(account_a, 301)

    assert account_a.balance == 1000
    assert account_b.balance == 300
    assert account_a.transactions == []
    assert account_b.transactions == []


@pytest.mark.parametrize("target", [None, "AramAccount1234", 42, object()])
def test_transfer_to_non_account(account_a, target):
    with pytest.raises(InvalidTransactionError):
        account_a.transfer_funds(target, 100)
    assert account_a.balance == 1000


def test_transfer_to_same_account(account_a):
    with pytest.raises(InvalidTransactionError):
        account_a.transfer_funds(account_a, 100)
    assert account_a.transactions == []


@pytest.mark.parametrize("amount", [0, -5])
def test_transfer_rejects_non_positive(account_a, account_b, amount):
    with pytest.raises(ValidationError):
        account_a.transfer_funds(account_b, amount)
    assert account_b.balance == 300


def test_transfer_between_account_kinds(account_a):
    joint = JointAccount(account_number="JOINT-000001", initial_balance=50, owners=["Ani", "Aram"])
    account_a.transfer_funds(joint, 25)
    assert joint.balance == 75
    assert account_a.balance == 975


def test_joint_account_requires_owner():
    with pytest.raises(ValidationError) as exc_info:
        JointAccount(account_number="JOINT-000001", owners=[])
    assert exc_info.value.field == "owners"


def test_joint_account_rejects_blank_owner():
    with pytest.raises(ValidationError):
        JointAccount(account_number="JOINT-000001", owners=["Ani", "  "])


def test_joint_owners_revalidated_on_assignment():
    joint = JointAccount(account_number="JOINT-000001", owners=["Ani"])
    with pytest.raises(ValidationError):
        joint.owners = []
    assert joint.owners == ["Ani"]


def test_describe_accounts(account_a):
    joint = JointAccount(account_number="JOINT-000001", owners=["Ani", "Aram"])

    assert account_a.describe() == {
        "kind": "individual",
        "account_number": "145xs6s51s51x5ssx1",
        "balance": 1000,
    }
    assert joint.describe()["kind"] == "joint"
    assert joint.describe()["owners"] == ["Ani", "Aram"]


def test_open_account_by_kind():
    individual = open_account({"account_number": "1234567890", "initial_balance": 5})
    joint = open_account({"kind": "joint", "account_number": "1234567891", "owners": ["Ani"]})

    assert isinstance(individual, IndividualAccount)
    assert individual.kind == AccountKind.INDIVIDUAL
    assert isinstance(joint, JointAccount)


def test_open_account_unknown_kind():
    with pytest.raises(ValidationError):
        open_account({"kind": "business", "account_number": "1234567890"})


def test_transaction_metrics_counted(account_a):
    def deposits_seen():
        value = REGISTRY.get_sample_value(
            'bank_transactions_recorded_total', {'transaction_type': 'DEPOSIT'}
        )
        return value or 0.0

    before = deposits_seen()
    account_a.deposit(1)
    account_a.deposit(2)
    assert deposits_seen() == before + 2
