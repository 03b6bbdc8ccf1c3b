"""Append-only transaction history"""

import threading
from dataclasses import replace
from typing import List

from freerider_bank.domain.models import TransactionRecord


class TransactionHistory:
    """Time-ordered log of completed transfers"""

    def __init__(self):
        self._records: List[TransactionRecord] = []
        self._lock = threading.Lock()

    def append(self, record: TransactionRecord) -> TransactionRecord:
        """
        Store a record and return it as stored.

        A record stamped earlier than the current tail (clock skew, or two
        accounts racing to append) is moved up to the tail's timestamp so the
        log stays non-decreasing.
        """
        with self._lock:
            if self._records and record.timestamp < self._records[-1].timestamp:
                record = replace(record, timestamp=self._records[-1].timestamp)
            self._records.append(record)
        return record

    def recent(self, limit: int) -> List[TransactionRecord]:
        """Last `limit` records, oldest first"""
        if limit <= 0:
            return []
        with self._lock:
            return self._records[-limit:]

    def __len__(self) -> int:
        return len(self._records)
