"""Unit tests for the account ledger"""

import pytest
from freerider_bank.domain.exceptions import AccountNotFoundError, InsufficientFundsError, InvalidArgumentError
from freerider_bank.domain.fixtures import seed_demo_accounts
from freerider_bank.domain.ledger import AccountLedger
from freerider_bank.domain.pin import PinHasher


@pytest.fixture
def ledger() -> AccountLedger:
    ledger = AccountLedger(PinHasher("test-salt", iterations=1000))
    seed_demo_accounts(ledger)
    return ledger


def test_seeded_accounts(ledger: AccountLedger):
    account = ledger.lookup("KB", "123456789012")
    assert account.holder_name == "홍길동"
    assert account.balance == 50000
    assert account.bank_name == "KB국민은행"
    assert len(ledger) == 2


def test_credential_is_hashed(ledger: AccountLedger):
    account = ledger.lookup("KB", "123456789012")
    assert account.credential != "1234"
    assert ledger.hasher.verify("1234", account.credential)


def test_lookup_unknown_account(ledger: AccountLedger):
    with pytest.raises(AccountNotFoundError) as exc_info:
        ledger.lookup("KB", "000000000000")
    assert exc_info.value.message == "계좌를 찾을 수 없습니다"


def test_debit_reduces_balance(ledger: AccountLedger):
    assert ledger.debit("KB", "123456789012", 20000) == 30000
    assert ledger.lookup("KB", "123456789012").balance == 30000


def test_debit_exact_balance(ledger: AccountLedger):
    assert ledger.debit("KB", "123456789012", 50000) == 0


def test_debit_insufficient_leaves_balance(ledger: AccountLedger):
    with pytest.raises(InsufficientFundsError):
        ledger.debit("KB", "123456789012", 50001)
    assert ledger.lookup("KB", "123456789012").balance == 50000


@pytest.mark.parametrize("amount", [0, -100, True, 10.5])
def test_debit_rejects_bad_amount(ledger: AccountLedger, amount):
    with pytest.raises(InvalidArgumentError):
        ledger.debit("KB", "123456789012", amount)
    assert ledger.lookup("KB", "123456789012").balance == 50000


def test_validate_matches_holder_only(ledger: AccountLedger):
    assert ledger.validate("KB", "123456789012", "홍길동") is True
    assert ledger.validate("KB", "123456789012", "김철수") is False
    assert ledger.validate("KB", "999", "홍길동") is False


def test_seed_rejects_negative_balance(ledger: AccountLedger):
    with pytest.raises(InvalidArgumentError):
        ledger.seed("KB", "111", "홍길동", -1, "1234")


def test_accounts_for_user(ledger: AccountLedger):
    ledger.seed("WOORI", "555", "김철수", 7000, "0000", owner_id="u2")

    shared = ledger.accounts_for_user("u1")
    assert [a.bank_code for a in shared] == ["KB", "SHINHAN"]  # default first

    owned = ledger.accounts_for_user("u2")
    assert {a.bank_code for a in owned} == {"KB", "SHINHAN", "WOORI"}


def test_lock_is_per_account(ledger: AccountLedger):
    assert ledger.lock("KB", "123456789012") is ledger.lock("KB", "123456789012")
    assert ledger.lock("KB", "123456789012") is not ledger.lock("SHINHAN", "987654321098")


def test_lock_requires_known_account(ledger: AccountLedger):
    with pytest.raises(AccountNotFoundError):
        ledger.lock("KB", "000000000000")
    assert len(ledger._locks) == 2
