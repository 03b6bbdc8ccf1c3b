"""Identifier generation for virtual accounts and transactions"""

import itertools
import secrets
import threading
import time

VIRTUAL_ACCOUNT_NUMBER_LENGTH = 14
TRANSACTION_PREFIX = "TXN"


class IdGenerator:
    """Produces virtual account numbers and process-unique transaction ids"""

    def __init__(self):
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def next_virtual_account_number(self) -> str:
        """14 random decimal digits; uniqueness is the registry's concern"""
        return "".join(str(secrets.randbelow(10)) for _ in range(VIRTUAL_ACCOUNT_NUMBER_LENGTH))

    def next_transaction_id(self, prefix: str = TRANSACTION_PREFIX) -> str:
        """
        <PREFIX>_<epoch millis>_<counter><random>

        The counter is strictly increasing within the process, so two ids never
        collide even when generated in the same millisecond.

        Example:
            TXN_1760000000000_0000421234
        """
        with self._lock:
            sequence = next(self._counter)
        millis = int(time.time() * 1000)
        return f"{prefix}_{millis}_{sequence:06d}{secrets.randbelow(10_000):04d}"
