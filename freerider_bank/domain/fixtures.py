"""Demo accounts seeded into the ledger at startup"""

from typing import Any, Dict, List

from freerider_bank.domain.ledger import AccountLedger

DEMO_PIN = "1234"

DEMO_ACCOUNTS: List[Dict[str, Any]] = [
    {
        "bank_code": "KB",
        "bank_name": "KB국민은행",
        "account_number": "123456789012",
        "holder_name": "홍길동",
        "balance": 50000,
        "is_default": True,
    },
    {
        "bank_code": "SHINHAN",
        "bank_name": "신한은행",
        "account_number": "987654321098",
        "holder_name": "홍길동",
        "balance": 100000,
        "is_default": False,
    },
]


def seed_demo_accounts(ledger: AccountLedger) -> None:
    for account in DEMO_ACCOUNTS:
        ledger.seed(pin=DEMO_PIN, **account)
