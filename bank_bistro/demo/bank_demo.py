"""Banking demo: two accounts, one transfer, both histories"""

from typing import Any, Dict
from bank_bistro.banking import BankCustomer, open_account
from bank_bistro.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_ACCOUNTS = [
    {"kind": "individual", "account_number": "145xs6s51s51x5ssx1", "initial_balance": 1000},
    {"kind": "individual", "account_number": "AramAccount1234", "initial_balance": 300},
]


def run_bank_demo(transfer_amount: float = 100) -> Dict[str, Any]:
    """
    Open two accounts for one customer and transfer between them

    Args:
        transfer_amount: Amount moved from the first account to the second

    Returns:
        Balances and transaction histories keyed by account number
    """
    customer = BankCustomer(name="Edmon", email="edmonpetrosyan07@mail.com", phone="+37493607262")
    source, target = (customer.add_account(open_account(data)) for data in DEMO_ACCOUNTS)

    source.transfer_funds(target, transfer_amount)
    logger.info(
        "Bank demo transfer done",
        source_balance=source.get_balance(),
        target_balance=target.get_balance()
    )

    return {
        "customer": customer.name,
        "accounts": [account.describe() for account in customer.view_accounts()],
        "histories": {
            account.account_number: [
                tx.model_dump(mode="json")
                for tx in customer.view_transaction_history(account.account_number)
            ]
            for account in customer.view_accounts()
        },
    }
