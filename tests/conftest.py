"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Generator
from fastapi.testclient import TestClient
from freerider_bank.api.main import create_app
from freerider_bank.config import Settings
from freerider_bank.service import BankService


class FakeClock:
    """Manually advanced clock"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def test_settings() -> Settings:
    """No simulated latency, cheap PIN hashing"""
    return Settings(
        transfer_delay_seconds=0,
        lookup_delay_seconds=0,
        provider_delay_seconds=0,
        pin_hash_iterations=1000,
        virtual_account_sweep_seconds=3600,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 15, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def service(test_settings: Settings, clock: FakeClock) -> BankService:
    """Ledger service seeded with the demo accounts"""
    bank_service = BankService(test_settings, clock=clock)
    bank_service.seed_fixtures()
    return bank_service


@pytest.fixture
def client(service: BankService) -> Generator[TestClient, None, None]:
    """FastAPI test client bound to the test service"""
    app = create_app(service)
    with TestClient(app) as test_client:
        yield test_client
