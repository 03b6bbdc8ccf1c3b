"""Bank transfer channel methods - argument parsing and result shaping"""

import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict

from freerider_bank.api.v1.schemas import (
    CreateVirtualAccountArgs,
    GetBalanceArgs,
    GetTransferHistoryArgs,
    GetUserAccountsArgs,
    GetVirtualAccountArgs,
    ProcessTransferArgs,
    ProviderTransferArgs,
    ValidateAccountArgs,
    parse_args,
)
from freerider_bank.domain.exceptions import DomainException
from freerider_bank.domain.models import VirtualAccount
from freerider_bank.domain.providers import PROVIDERS
from freerider_bank.infrastructure.observability.logging import log_transfer
from freerider_bank.infrastructure.observability.metrics import (
    provider_transfer_counter,
    record_transfer,
    virtual_account_active_gauge,
    virtual_account_created_counter,
)
from freerider_bank.service import BankService
from freerider_bank.utils.date_utils import to_iso

CHARGE_DESTINATION = "FREERIDER_CHARGE"
CHARGE_DESCRIPTION = "교통카드 충전"

Handler = Callable[[BankService, Dict[str, Any], str], Awaitable[Any]]


@dataclass(frozen=True)
class ChannelMethod:
    """A dispatchable method and the catch-all code for its failures"""

    handler: Handler
    error_code: str


def _virtual_account_payload(account: VirtualAccount) -> Dict[str, Any]:
    return {
        "accountNumber": account.account_number,
        "bankName": account.bank_name,
        "bankCode": account.bank_code,
        "amount": account.amount,
        "expireAt": to_iso(account.expire_at),
        "depositorName": account.depositor_name,
    }


async def create_virtual_account(service: BankService, args: Dict[str, Any], request_id: str) -> Dict[str, Any]:
    params = parse_args(CreateVirtualAccountArgs, args)
    account = service.registry.create(
        user_id=params.user_id,
        amount=params.amount,
        card_type=params.card_type,
        card_number=params.card_number,
        ttl_minutes=params.expire_minutes,
    )
    virtual_account_created_counter.inc()
    return _virtual_account_payload(account)


async def get_virtual_account(service: BankService, args: Dict[str, Any], request_id: str) -> Dict[str, Any]:
    params = parse_args(GetVirtualAccountArgs, args)
    account = service.registry.lookup(params.account_number)
    payload = _virtual_account_payload(account)
    payload.update({"userId": account.user_id, "cardType": account.card_type})
    return payload


async def consume_virtual_account(service: BankService, args: Dict[str, Any], request_id: str) -> Dict[str, Any]:
    """Close a virtual account once its deposit has arrived"""
    params = parse_args(GetVirtualAccountArgs, args)
    account = service.registry.consume(params.account_number)
    virtual_account_active_gauge.set(service.registry.active_count())
    payload = _virtual_account_payload(account)
    payload["consumed"] = True
    return payload


async def process_transfer(service: BankService, args: Dict[str, Any], request_id: str) -> Dict[str, Any]:
    params = parse_args(ProcessTransferArgs, args)
    start_time = time.time()

    try:
        receipt = await service.processor.process(
            from_bank=params.from_bank,
            from_account=params.from_account,
            holder_name=params.account_holder,
            amount=params.amount,
            pin=params.pin,
            card_id=params.card_id,
        )
    except DomainException as e:
        record_transfer(e.code)
        log_transfer(request_id, params.from_bank, e.code, params.amount, (time.time() - start_time) * 1000)
        raise
    except Exception:
        record_transfer("error")
        log_transfer(request_id, params.from_bank, "error", params.amount, (time.time() - start_time) * 1000)
        raise

    record_transfer("success", receipt.amount)
    log_transfer(
        request_id,
        params.from_bank,
        "success",
        receipt.amount,
        (time.time() - start_time) * 1000,
        transaction_id=receipt.transaction_id,
    )

    return {
        "success": True,
        "transactionId": receipt.transaction_id,
        "amount": receipt.amount,
        "completedAt": to_iso(receipt.completed_at),
        "newBalance": receipt.new_balance,
    }


async def validate_account(service: BankService, args: Dict[str, Any], request_id: str) -> bool:
    params = parse_args(ValidateAccountArgs, args)
    await service.simulate_lookup_delay()
    return service.ledger.validate(params.bank, params.account, params.holder)


async def get_user_accounts(service: BankService, args: Dict[str, Any], request_id: str) -> list:
    params = parse_args(GetUserAccountsArgs, args)
    return [
        {
            "bank": account.bank_code,
            "bankName": account.bank_name,
            "accountNumber": account.account_number,
            "accountHolder": account.holder_name,
            "balance": account.balance,
            "isDefault": account.is_default,
        }
        for account in service.ledger.accounts_for_user(params.user_id)
    ]


async def get_balance(service: BankService, args: Dict[str, Any], request_id: str) -> int:
    params = parse_args(GetBalanceArgs, args)
    return await service.processor.balance(params.bank, params.account, params.pin)


async def get_transfer_history(service: BankService, args: Dict[str, Any], request_id: str) -> list:
    params = parse_args(GetTransferHistoryArgs, args)
    limit = params.limit if params.limit is not None else service.settings.history_default_limit

    # History is not partitioned by user; every caller sees the shared log
    return [
        {
            "transactionId": record.transaction_id,
            "amount": record.amount,
            "fromBank": record.from_bank,
            "fromAccount": record.from_account,
            "toAccount": CHARGE_DESTINATION,
            "transferredAt": to_iso(record.timestamp),
            "status": record.status.value,
            "description": CHARGE_DESCRIPTION,
            "cardId": record.card_id,
        }
        for record in service.history.recent(limit)
    ]


def _provider_transfer(provider: str) -> Handler:
    async def handler(service: BankService, args: Dict[str, Any], request_id: str) -> Dict[str, Any]:
        params = parse_args(ProviderTransferArgs, args)
        result = await service.providers.transfer(provider, params.amount, params.card_id)
        provider_transfer_counter.labels(provider=provider).inc()
        return result

    return handler


METHODS: Dict[str, ChannelMethod] = {
    "createVirtualAccount": ChannelMethod(create_virtual_account, "CREATE_VIRTUAL_ACCOUNT_ERROR"),
    "getVirtualAccount": ChannelMethod(get_virtual_account, "GET_VIRTUAL_ACCOUNT_ERROR"),
    "consumeVirtualAccount": ChannelMethod(consume_virtual_account, "CONSUME_VIRTUAL_ACCOUNT_ERROR"),
    "processTransfer": ChannelMethod(process_transfer, "TRANSFER_ERROR"),
    "validateAccount": ChannelMethod(validate_account, "VALIDATION_ERROR"),
    "getUserAccounts": ChannelMethod(get_user_accounts, "GET_ACCOUNTS_ERROR"),
    "getBalance": ChannelMethod(get_balance, "BALANCE_ERROR"),
    "getTransferHistory": ChannelMethod(get_transfer_history, "HISTORY_ERROR"),
    "processTossTransfer": ChannelMethod(_provider_transfer("toss"), PROVIDERS["toss"].error_code),
    "processKakaoPayTransfer": ChannelMethod(_provider_transfer("kakaopay"), PROVIDERS["kakaopay"].error_code),
    "processNaverPayTransfer": ChannelMethod(_provider_transfer("naverpay"), PROVIDERS["naverpay"].error_code),
}
