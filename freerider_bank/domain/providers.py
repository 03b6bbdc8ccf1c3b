"""Simulated quick-pay providers (Toss, KakaoPay, NaverPay)"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict

from freerider_bank.domain.exceptions import InvalidArgumentError
from freerider_bank.domain.ids import IdGenerator
from freerider_bank.domain.transfers import require_amount, require_text


@dataclass(frozen=True)
class QuickPayProvider:
    """Provider tag used in transaction ids and error codes"""

    name: str
    id_prefix: str
    error_code: str


PROVIDERS: Dict[str, QuickPayProvider] = {
    "toss": QuickPayProvider("toss", "TOSS", "TOSS_TRANSFER_ERROR"),
    "kakaopay": QuickPayProvider("kakaopay", "KAKAO", "KAKAOPAY_TRANSFER_ERROR"),
    "naverpay": QuickPayProvider("naverpay", "NAVER", "NAVERPAY_TRANSFER_ERROR"),
}


class QuickPayGateway:
    """Delay-and-echo stubs; these never touch the ledger"""

    def __init__(self, ids: IdGenerator, delay_seconds: float = 0.0):
        self.ids = ids
        self.delay_seconds = delay_seconds

    async def transfer(self, provider: str, amount: int, card_id: str) -> Dict[str, Any]:
        quick_pay = PROVIDERS.get(provider)
        if quick_pay is None:
            raise InvalidArgumentError(f"unknown provider: {provider}")

        require_amount("amount", amount)
        require_text("cardId", card_id)

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        # Provider ids wrap a regular TXN id: TOSS_TXN_...
        return {
            "success": True,
            "transactionId": f"{quick_pay.id_prefix}_{self.ids.next_transaction_id()}",
            "amount": amount,
        }
