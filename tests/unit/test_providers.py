"""Unit tests for quick-pay provider stubs"""

import pytest
from freerider_bank.domain.exceptions import InvalidArgumentError
from freerider_bank.domain.ids import IdGenerator
from freerider_bank.domain.providers import QuickPayGateway


@pytest.fixture
def gateway() -> QuickPayGateway:
    return QuickPayGateway(IdGenerator())


@pytest.mark.parametrize(
    "provider, prefix",
    [("toss", "TOSS_TXN_"), ("kakaopay", "KAKAO_TXN_"), ("naverpay", "NAVER_TXN_")],
)
async def test_provider_transfer_echoes_amount(gateway: QuickPayGateway, provider, prefix):
    result = await gateway.transfer(provider, 15000, "card1")

    assert result["success"] is True
    assert result["amount"] == 15000
    assert result["transactionId"].startswith(prefix)


async def test_unknown_provider(gateway: QuickPayGateway):
    with pytest.raises(InvalidArgumentError):
        await gateway.transfer("paypal", 1000, "card1")


async def test_provider_requires_positive_amount(gateway: QuickPayGateway):
    with pytest.raises(InvalidArgumentError):
        await gateway.transfer("toss", 0, "card1")
