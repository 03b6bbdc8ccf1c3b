"""Channel HTTP client used by app platforms to reach the ledger service"""

import httpx
from typing import Any, Dict
from freerider_bank.domain.exceptions import (
    AccountNotFoundError,
    DomainException,
    InsufficientFundsError,
    InvalidPinError,
    InternalError,
    VirtualAccountNotFoundError,
)
from freerider_bank.config import settings

EXCEPTIONS_BY_CODE = {
    AccountNotFoundError.code: AccountNotFoundError,
    InsufficientFundsError.code: InsufficientFundsError,
    InvalidPinError.code: InvalidPinError,
    VirtualAccountNotFoundError.code: VirtualAccountNotFoundError,
}


class ChannelError(DomainException):
    """Channel returned a catch-all error code (e.g. TRANSFER_ERROR)"""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class ChannelClient:
    """Invokes channel methods and maps error envelopes back to exceptions"""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout or settings.transfer_delay_seconds + 5.0
        self.transport = transport

    async def invoke(self, method: str, **args: Any) -> Any:
        """
        Call one channel method.

        Raises:
            AccountNotFoundError, InsufficientFundsError, InvalidPinError,
            VirtualAccountNotFoundError: typed ledger failures
            ChannelError: method catch-all codes (bad arguments, unknown method)
            InternalError: timeout, transport failure or unreadable response
        """
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(f"/v1/channel/{method}", json=args)
                data = response.json()
            except httpx.TimeoutException as e:
                raise InternalError(f"Channel timeout after {self.timeout}s") from e
            except httpx.RequestError as e:
                raise InternalError(f"Channel unavailable: {e}") from e
            except ValueError as e:
                raise InternalError(f"Invalid channel response: {e}") from e

        if response.is_success:
            return data.get("result")

        code = data.get("code", "INTERNAL_ERROR")
        message = data.get("message", "")
        exc_class = EXCEPTIONS_BY_CODE.get(code)
        if exc_class is not None:
            raise exc_class(message)
        raise ChannelError(code, message)

    async def process_transfer(self, **args: Any) -> Dict[str, Any]:
        return await self.invoke("processTransfer", **args)

    async def create_virtual_account(self, **args: Any) -> Dict[str, Any]:
        return await self.invoke("createVirtualAccount", **args)
