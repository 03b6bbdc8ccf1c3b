"""Transfer processing - validate fully, then mutate once"""

import asyncio
from typing import Any

from freerider_bank.domain.exceptions import InsufficientFundsError, InvalidArgumentError, InvalidPinError
from freerider_bank.domain.history import TransactionHistory
from freerider_bank.domain.ids import IdGenerator
from freerider_bank.domain.ledger import AccountLedger
from freerider_bank.domain.models import TransactionRecord, TransactionStatus, TransferReceipt
from freerider_bank.utils.date_utils import Clock, utc_now


def require_text(name: str, value: Any) -> str:
    if value is None:
        raise InvalidArgumentError(f"{name} required")
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{name} invalid")
    return value


def require_amount(name: str, value: Any) -> int:
    if value is None:
        raise InvalidArgumentError(f"{name} required")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{name} invalid")
    return value


class TransferProcessor:
    """Debits a ledger account and records the transfer"""

    def __init__(
        self,
        ledger: AccountLedger,
        history: TransactionHistory,
        ids: IdGenerator,
        delay_seconds: float = 0.0,
        lookup_delay_seconds: float = 0.0,
        clock: Clock = utc_now,
    ):
        self.ledger = ledger
        self.history = history
        self.ids = ids
        self.delay_seconds = delay_seconds
        self.lookup_delay_seconds = lookup_delay_seconds
        self.clock = clock

    async def process(
        self,
        from_bank: str,
        from_account: str,
        holder_name: str,
        amount: int,
        pin: str,
        card_id: str,
    ) -> TransferReceipt:
        """
        Run a PIN-authenticated transfer out of a ledger account.

        Flow:
        1. Validate arguments
        2. Simulated network latency (no lock held)
        3. Under the account lock: lookup, balance check, PIN check
        4. Debit, generate id, append SUCCESS record
        5. Return receipt

        Raises:
            InvalidArgumentError, AccountNotFoundError,
            InsufficientFundsError, InvalidPinError
        """
        require_text("fromBank", from_bank)
        require_text("fromAccount", from_account)
        require_text("accountHolder", holder_name)
        require_amount("amount", amount)
        require_text("pin", pin)
        require_text("cardId", card_id)

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        async with self.ledger.lock(from_bank, from_account):
            account = self.ledger.lookup(from_bank, from_account)

            if account.balance < amount:
                raise InsufficientFundsError()

            # PBKDF2 runs off the event loop
            if not await asyncio.to_thread(self.ledger.hasher.verify, pin, account.credential):
                raise InvalidPinError()

            new_balance = self.ledger.debit(from_bank, from_account, amount)
            record = self.history.append(
                TransactionRecord(
                    transaction_id=self.ids.next_transaction_id(),
                    from_bank=from_bank,
                    from_account=from_account,
                    amount=amount,
                    timestamp=self.clock(),
                    card_id=card_id,
                    status=TransactionStatus.SUCCESS,
                )
            )

        return TransferReceipt(
            transaction_id=record.transaction_id,
            amount=amount,
            completed_at=record.timestamp,
            new_balance=new_balance,
        )

    async def balance(self, bank: str, account: str, pin: str) -> int:
        """Current balance after PIN verification"""
        require_text("bank", bank)
        require_text("account", account)
        require_text("pin", pin)

        if self.lookup_delay_seconds > 0:
            await asyncio.sleep(self.lookup_delay_seconds)

        bank_account = self.ledger.lookup(bank, account)
        if not await asyncio.to_thread(self.ledger.hasher.verify, pin, bank_account.credential):
            raise InvalidPinError()
        return bank_account.balance
