"""Virtual deposit accounts with time-bounded lifetime"""

import logging
import threading
from datetime import datetime
from typing import Dict

from freerider_bank.domain.exceptions import InvalidArgumentError, VirtualAccountNotFoundError
from freerider_bank.domain.ids import IdGenerator
from freerider_bank.domain.models import VirtualAccount
from freerider_bank.utils.date_utils import Clock, add_minutes, utc_now

logger = logging.getLogger(__name__)

MAX_NUMBER_ATTEMPTS = 10


class VirtualAccountRegistry:
    """
    Owns every live virtual account.

    Expiry is logical: lookup() compares the stored expire_at against the
    clock, so an expired entry is never returned even before sweep() has
    physically removed it.
    """

    def __init__(
        self,
        ids: IdGenerator,
        bank_code: str = "KB",
        bank_name: str = "KB국민은행",
        depositor_name: str = "FREERIDER_USER",
        default_ttl_minutes: int = 30,
        clock: Clock = utc_now,
    ):
        self.ids = ids
        self.bank_code = bank_code
        self.bank_name = bank_name
        self.depositor_name = depositor_name
        self.default_ttl_minutes = default_ttl_minutes
        self.clock = clock
        self._accounts: Dict[str, VirtualAccount] = {}
        self._lock = threading.Lock()

    def create(
        self,
        user_id: str,
        amount: int,
        card_type: str,
        card_number: str,
        ttl_minutes: int | None = None,
    ) -> VirtualAccount:
        """
        Issue a new virtual account expiring ttl_minutes from now.

        Raises:
            InvalidArgumentError: amount not a positive int, ttl_minutes <= 0
        """
        if ttl_minutes is None:
            ttl_minutes = self.default_ttl_minutes
        if isinstance(ttl_minutes, bool) or not isinstance(ttl_minutes, int) or ttl_minutes <= 0:
            raise InvalidArgumentError("expireMinutes invalid")
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidArgumentError("amount invalid")

        now = self.clock()
        with self._lock:
            account_number = self._unused_number(now)
            account = VirtualAccount(
                account_number=account_number,
                bank_name=self.bank_name,
                bank_code=self.bank_code,
                amount=amount,
                expire_at=add_minutes(now, ttl_minutes),
                depositor_name=self.depositor_name,
                user_id=user_id,
                card_type=card_type,
                card_number=card_number,
            )
            self._accounts[account_number] = account

        return account

    def lookup(self, account_number: str) -> VirtualAccount:
        with self._lock:
            account = self._accounts.get(account_number)
        if account is None or account.is_expired(self.clock()):
            raise VirtualAccountNotFoundError()
        return account

    def consume(self, account_number: str) -> VirtualAccount:
        """Remove a live account once its deposit has been received"""
        now = self.clock()
        with self._lock:
            account = self._accounts.get(account_number)
            if account is None or account.is_expired(now):
                raise VirtualAccountNotFoundError()
            del self._accounts[account_number]
        return account

    def sweep(self) -> int:
        """Drop expired entries; returns the number removed"""
        now = self.clock()
        with self._lock:
            expired = [number for number, account in self._accounts.items() if account.is_expired(now)]
            for number in expired:
                del self._accounts[number]

        if expired:
            logger.debug("Swept expired virtual accounts", extra={"removed": len(expired)})
        return len(expired)

    def active_count(self) -> int:
        now = self.clock()
        with self._lock:
            return sum(1 for account in self._accounts.values() if not account.is_expired(now))

    def _unused_number(self, now: datetime) -> str:
        # Expired entries may still be in the map; their numbers are free again
        for _ in range(MAX_NUMBER_ATTEMPTS):
            number = self.ids.next_virtual_account_number()
            existing = self._accounts.get(number)
            if existing is None or existing.is_expired(now):
                return number
        raise RuntimeError("Could not allocate a free virtual account number")
