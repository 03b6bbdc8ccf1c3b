"""Pydantic schemas for channel method arguments and error envelopes"""

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from freerider_bank.domain.exceptions import InvalidArgumentError

ArgsT = TypeVar("ArgsT", bound="ChannelArgs")


class ChannelArgs(BaseModel):
    """Argument map sent over the channel; keys are camelCase"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CreateVirtualAccountArgs(ChannelArgs):
    user_id: StrictStr = Field(..., alias="userId", min_length=1)
    amount: StrictInt = Field(..., gt=0)
    card_type: StrictStr = Field(..., alias="cardType", min_length=1)
    card_number: StrictStr = Field(..., alias="cardNumber", min_length=1)
    expire_minutes: Optional[StrictInt] = Field(None, alias="expireMinutes", gt=0)


class GetVirtualAccountArgs(ChannelArgs):
    account_number: StrictStr = Field(..., alias="accountNumber", min_length=1)


class ProcessTransferArgs(ChannelArgs):
    from_bank: StrictStr = Field(..., alias="fromBank", min_length=1)
    from_account: StrictStr = Field(..., alias="fromAccount", min_length=1)
    account_holder: StrictStr = Field(..., alias="accountHolder", min_length=1)
    amount: StrictInt = Field(..., gt=0)
    pin: StrictStr = Field(..., min_length=1)
    card_id: StrictStr = Field(..., alias="cardId", min_length=1)


class ValidateAccountArgs(ChannelArgs):
    bank: StrictStr = Field(..., min_length=1)
    account: StrictStr = Field(..., min_length=1)
    holder: StrictStr = Field(..., min_length=1)


class GetUserAccountsArgs(ChannelArgs):
    user_id: StrictStr = Field(..., alias="userId", min_length=1)


class GetBalanceArgs(ChannelArgs):
    bank: StrictStr = Field(..., min_length=1)
    account: StrictStr = Field(..., min_length=1)
    pin: StrictStr = Field(..., min_length=1)


class GetTransferHistoryArgs(ChannelArgs):
    user_id: StrictStr = Field(..., alias="userId", min_length=1)
    limit: Optional[StrictInt] = None  # <= 0 yields an empty list


class ProviderTransferArgs(ChannelArgs):
    amount: StrictInt = Field(..., gt=0)
    card_id: StrictStr = Field(..., alias="cardId", min_length=1)


class ErrorEnvelope(BaseModel):
    """Structured failure returned by the channel"""

    code: str
    message: str
    details: Optional[Any] = None


def parse_args(model: Type[ArgsT], args: Dict[str, Any]) -> ArgsT:
    """
    Validate an argument map, reporting the first bad field by its wire name.

    Raises:
        InvalidArgumentError: "<name> required" or "<name> invalid"
    """
    try:
        return model.model_validate(args)
    except ValidationError as e:
        error = e.errors()[0]
        name = str(error["loc"][0]) if error["loc"] else "arguments"
        suffix = "required" if error["type"] == "missing" else "invalid"
        raise InvalidArgumentError(f"{name} {suffix}") from e
