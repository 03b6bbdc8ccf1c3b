"""POST /v1/channel/{method} - method-dispatch boundary used by the app platforms"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from freerider_bank.api.dependencies import get_bank_service, get_request_id
from freerider_bank.api.v1.bank_transfer import METHODS
from freerider_bank.api.v1.schemas import ErrorEnvelope
from freerider_bank.domain.exceptions import DomainException, InternalError, InvalidArgumentError
from freerider_bank.service import BankService

router = APIRouter()

NOT_IMPLEMENTED = "NOT_IMPLEMENTED"

STATUS_BY_CODE = {
    "INVALID_ACCOUNT": 404,
    "VIRTUAL_ACCOUNT_NOT_FOUND": 404,
    "INSUFFICIENT_BALANCE": 409,
    "INVALID_PIN": 401,
}


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    envelope = ErrorEnvelope(code=code, message=message)
    return JSONResponse(status_code=status_code, content=envelope.model_dump())


@router.post("/channel/{method}")
async def invoke_method(
    method: str,
    request: Request,
    args: Any = Body(None),
    service: BankService = Depends(get_bank_service),
):
    """
    Dispatch a channel call.

    Returns:
        200 {"result": ...} on success, otherwise an error envelope
        {"code", "message", "details"}. Invalid arguments and unexpected
        failures carry the method's catch-all code.
    """
    request_id = get_request_id(request)
    channel_method = METHODS.get(method)
    if channel_method is None:
        return error_response(404, NOT_IMPLEMENTED, f"Method not implemented: {method}")

    try:
        if args is None:
            args = {}
        if not isinstance(args, dict):
            raise InvalidArgumentError("arguments invalid")

        result = await channel_method.handler(service, args, request_id)
        return {"result": result}

    except InvalidArgumentError as e:
        logging.warning(f"Invalid arguments for {method}: {e.message}", extra={"request_id": request_id})
        return error_response(400, channel_method.error_code, e.message)

    except InternalError as e:
        logging.error(f"Internal error in {method}: {e.message}", extra={"request_id": request_id})
        return error_response(500, channel_method.error_code, e.message)

    except DomainException as e:
        logging.info(f"{method} rejected: {e.code}", extra={"request_id": request_id})
        return error_response(STATUS_BY_CODE.get(e.code, 400), e.code, e.message)

    except Exception as e:
        logging.exception(f"Unexpected error in {method}", extra={"request_id": request_id})
        return error_response(500, channel_method.error_code, str(e) or InternalError.default_message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Undecodable bodies get the method's envelope instead of FastAPI's 422"""
    method = request.path_params.get("method", "")
    channel_method = METHODS.get(method)
    if channel_method is None:
        return error_response(404, NOT_IMPLEMENTED, f"Method not implemented: {method}")

    logging.warning(f"Malformed body for {method}", extra={"request_id": get_request_id(request)})
    return error_response(400, channel_method.error_code, "arguments invalid")
