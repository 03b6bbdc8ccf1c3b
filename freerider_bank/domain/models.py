"""Domain models - pure Python dataclasses representing ledger entities"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class TransactionStatus(str, Enum):
    """Outcome recorded on a transaction"""

    SUCCESS = "SUCCESS"


@dataclass
class BankAccount:
    """Ledger account keyed by (bank_code, account_number)"""

    bank_code: str
    account_number: str
    holder_name: str
    balance: int
    credential: str  # PIN hash, never the PIN
    bank_name: str = ""
    is_default: bool = False
    owner_id: Optional[str] = None  # None = demo account shared by every user

    @property
    def key(self) -> str:
        return account_key(self.bank_code, self.account_number)


@dataclass(frozen=True)
class VirtualAccount:
    """Short-lived deposit account used to fund a card top-up"""

    account_number: str
    bank_name: str
    bank_code: str
    amount: int
    expire_at: datetime
    depositor_name: str
    user_id: str
    card_type: str
    card_number: str

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expire_at


@dataclass(frozen=True)
class TransactionRecord:
    """Completed transfer, immutable once appended"""

    transaction_id: str
    from_bank: str
    from_account: str
    amount: int
    timestamp: datetime
    card_id: str
    status: TransactionStatus = TransactionStatus.SUCCESS


@dataclass(frozen=True)
class TransferReceipt:
    """Structured success result of a transfer"""

    transaction_id: str
    amount: int
    completed_at: datetime
    new_balance: int


def account_key(bank_code: str, account_number: str) -> str:
    """Ledger key for a bank/account pair"""
    return f"{bank_code}:{account_number}"
