"""Ledger service - owns all in-memory banking state for one process"""

import asyncio
import logging

from freerider_bank.config import Settings, settings as default_settings
from freerider_bank.domain.fixtures import seed_demo_accounts
from freerider_bank.domain.history import TransactionHistory
from freerider_bank.domain.ids import IdGenerator
from freerider_bank.domain.ledger import AccountLedger
from freerider_bank.domain.pin import PinHasher
from freerider_bank.domain.providers import QuickPayGateway
from freerider_bank.domain.transfers import TransferProcessor
from freerider_bank.domain.virtual_accounts import VirtualAccountRegistry
from freerider_bank.infrastructure.observability.metrics import virtual_account_active_gauge
from freerider_bank.utils.date_utils import Clock, utc_now

logger = logging.getLogger(__name__)


class BankService:
    """
    Single owner of ledger, virtual-account registry and transaction history.

    Constructed once per process by the application factory. start() launches
    the background sweep that reclaims expired virtual accounts; stop()
    cancels it. State is lost when the process exits.
    """

    def __init__(self, config: Settings | None = None, clock: Clock = utc_now):
        self.settings = config or default_settings
        self.clock = clock

        self.hasher = PinHasher(self.settings.pin_hash_salt, self.settings.pin_hash_iterations)
        self.ids = IdGenerator()
        self.ledger = AccountLedger(self.hasher)
        self.history = TransactionHistory()
        self.registry = VirtualAccountRegistry(
            self.ids,
            bank_code=self.settings.virtual_account_bank_code,
            bank_name=self.settings.virtual_account_bank_name,
            depositor_name=self.settings.virtual_account_depositor,
            default_ttl_minutes=self.settings.virtual_account_ttl_minutes,
            clock=clock,
        )
        self.processor = TransferProcessor(
            self.ledger,
            self.history,
            self.ids,
            delay_seconds=self.settings.transfer_delay_seconds,
            lookup_delay_seconds=self.settings.lookup_delay_seconds,
            clock=clock,
        )
        self.providers = QuickPayGateway(self.ids, delay_seconds=self.settings.provider_delay_seconds)

        self._sweeper: asyncio.Task | None = None

    def seed_fixtures(self) -> None:
        seed_demo_accounts(self.ledger)
        logger.info("Seeded demo accounts", extra={"accounts": len(self.ledger)})

    async def start(self) -> None:
        if self._sweeper is None:
            self._sweeper = asyncio.create_task(self._sweep_forever())

    async def stop(self) -> None:
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        try:
            await self._sweeper
        except asyncio.CancelledError:
            pass
        self._sweeper = None

    async def simulate_lookup_delay(self) -> None:
        if self.settings.lookup_delay_seconds > 0:
            await asyncio.sleep(self.settings.lookup_delay_seconds)

    def sweep(self) -> int:
        removed = self.registry.sweep()
        virtual_account_active_gauge.set(self.registry.active_count())
        return removed

    async def _sweep_forever(self) -> None:
        while True:
            await asyncio.sleep(self.settings.virtual_account_sweep_seconds)
            try:
                self.sweep()
            except Exception:
                logger.exception("Virtual account sweep failed")
