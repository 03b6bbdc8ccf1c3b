"""Unit tests for the ledger service lifecycle"""

import asyncio
from prometheus_client import REGISTRY
from freerider_bank.config import Settings
from freerider_bank.service import BankService


def test_service_wires_settings(test_settings: Settings):
    service = BankService(test_settings)

    assert service.registry.bank_code == test_settings.virtual_account_bank_code
    assert service.registry.default_ttl_minutes == 30
    assert service.processor.delay_seconds == 0
    assert service.hasher.iterations == 1000
    assert len(service.ledger) == 0


def test_sweep_updates_gauge(service: BankService, clock):
    service.registry.create("u1", 5000, "T-money", "c1", ttl_minutes=1)
    service.registry.create("u1", 5000, "T-money", "c1", ttl_minutes=5)
    clock.advance(61)

    assert service.sweep() == 1
    assert REGISTRY.get_sample_value("freerider_virtual_account_active") == 1


async def test_background_sweeper_runs(service: BankService, clock):
    service.settings.virtual_account_sweep_seconds = 0.01
    service.registry.create("u1", 5000, "T-money", "c1", ttl_minutes=1)
    clock.advance(61)

    await service.start()
    try:
        for _ in range(100):
            if not service.registry._accounts:
                break
            await asyncio.sleep(0.01)
    finally:
        await service.stop()

    assert service._sweeper is None
    assert service.registry._accounts == {}


async def test_stop_without_start(service: BankService):
    await service.stop()
    assert service._sweeper is None
