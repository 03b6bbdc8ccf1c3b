"""In-memory account ledger - the single source of truth for balances"""

import asyncio
from typing import Dict, List, Optional

from freerider_bank.domain.exceptions import AccountNotFoundError, InsufficientFundsError, InvalidArgumentError
from freerider_bank.domain.models import BankAccount, account_key
from freerider_bank.domain.pin import PinHasher


class AccountLedger:
    """
    Maps bank:account keys to BankAccount records.

    Balance mutation goes through debit() only. Callers that need a
    check-then-debit sequence to be atomic hold lock(bank, account) around it;
    locks are per account so transfers on different accounts never wait on
    each other.
    """

    def __init__(self, hasher: PinHasher):
        self.hasher = hasher
        self._accounts: Dict[str, BankAccount] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def seed(
        self,
        bank_code: str,
        account_number: str,
        holder_name: str,
        balance: int,
        pin: str,
        bank_name: str = "",
        is_default: bool = False,
        owner_id: Optional[str] = None,
    ) -> BankAccount:
        """Register an account; the PIN is hashed before it is stored"""
        if balance < 0:
            raise InvalidArgumentError("balance invalid")

        account = BankAccount(
            bank_code=bank_code,
            account_number=account_number,
            holder_name=holder_name,
            balance=balance,
            credential=self.hasher.hash(pin),
            bank_name=bank_name,
            is_default=is_default,
            owner_id=owner_id,
        )
        self._accounts[account.key] = account
        self._locks.setdefault(account.key, asyncio.Lock())
        return account

    def lookup(self, bank_code: str, account_number: str) -> BankAccount:
        account = self._accounts.get(account_key(bank_code, account_number))
        if account is None:
            raise AccountNotFoundError()
        return account

    def lock(self, bank_code: str, account_number: str) -> asyncio.Lock:
        """Per-account mutex serializing balance check and debit; created at seed time"""
        account_lock = self._locks.get(account_key(bank_code, account_number))
        if account_lock is None:
            raise AccountNotFoundError()
        return account_lock

    def debit(self, bank_code: str, account_number: str, amount: int) -> int:
        """Subtract amount if the balance covers it; returns the new balance"""
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidArgumentError("amount invalid")

        account = self.lookup(bank_code, account_number)
        if account.balance < amount:
            raise InsufficientFundsError()

        account.balance -= amount
        return account.balance

    def validate(self, bank_code: str, account_number: str, holder_name: str) -> bool:
        """Account exists and the holder name matches (no PIN check)"""
        account = self._accounts.get(account_key(bank_code, account_number))
        return account is not None and account.holder_name == holder_name

    def accounts_for_user(self, user_id: str) -> List[BankAccount]:
        """Accounts owned by user_id plus shared demo accounts, default first"""
        accounts = [a for a in self._accounts.values() if a.owner_id is None or a.owner_id == user_id]
        return sorted(accounts, key=lambda a: not a.is_default)

    def __len__(self) -> int:
        return len(self._accounts)
