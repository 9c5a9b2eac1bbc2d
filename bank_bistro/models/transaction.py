"""Transaction data model"""

from pydantic import Field
from datetime import datetime
from typing import Optional
from bank_bistro.constants import TransactionType
from .base import Record


class Transaction(Record):
    """Account history entry, created alongside the balance change it records"""

    account_number: str = Field(..., description="Account whose history holds this record")
    amount: float = Field(..., gt=0, description="Amount moved, always positive")
    transaction_type: TransactionType = Field(..., description="DEPOSIT, WITHDRAW, TRANSFER_OUT or TRANSFER_IN")
    from_account: Optional[str] = Field(None, description="Source account number")
    to_account: Optional[str] = Field(None, description="Destination account number")
    timestamp: datetime = Field(default_factory=datetime.now, description="Creation timestamp")
