"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    code = "INTERNAL_ERROR"
    default_message = "처리 중 오류가 발생했습니다"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgumentError(DomainException):
    """Required argument missing or malformed"""

    code = "INVALID_ARGUMENTS"
    default_message = "Required arguments missing"


class AccountNotFoundError(DomainException):
    """No ledger account for the bank/account pair"""

    code = "INVALID_ACCOUNT"
    default_message = "계좌를 찾을 수 없습니다"


class InsufficientFundsError(DomainException):
    """Balance lower than the requested amount"""

    code = "INSUFFICIENT_BALANCE"
    default_message = "잔액이 부족합니다"


class InvalidPinError(DomainException):
    """PIN does not match the stored credential"""

    code = "INVALID_PIN"
    default_message = "비밀번호가 일치하지 않습니다"


class VirtualAccountNotFoundError(DomainException):
    """Virtual account unknown, consumed or expired"""

    code = "VIRTUAL_ACCOUNT_NOT_FOUND"
    default_message = "가상계좌를 찾을 수 없습니다"


class InternalError(DomainException):
    """Unexpected failure wrapped for the caller"""

    pass
