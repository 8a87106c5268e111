"""Application-level exceptions."""

from enum import Enum


class ErrorKind(str, Enum):
    """Recoverable failure kinds reported by ledger operations."""

    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    OVERDRAFT_EXCEEDED = "OVERDRAFT_EXCEEDED"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    UNSUPPORTED_CAPABILITY = "UNSUPPORTED_CAPABILITY"


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, code: str = "NOT_FOUND"):
        super().__init__(f"{resource} not found: {identifier}", code=code)


class AccountNotFoundError(NotFoundError):
    """No account in the collection is held under the given owner name."""

    def __init__(self, name: str):
        super().__init__("Account", name, code=ErrorKind.ACCOUNT_NOT_FOUND.value)
        self.name = name


class InsufficientFundsError(AppError):
    """Savings withdrawal larger than the current balance."""

    def __init__(self, requested: str, available: str):
        super().__init__(
            f"Insufficient funds: requested {requested}, available {available}",
            code=ErrorKind.INSUFFICIENT_FUNDS.value,
        )


class OverdraftExceededError(AppError):
    """Checking withdrawal beyond balance plus overdraft allowance."""

    def __init__(self, requested: str, available: str):
        super().__init__(
            f"Overdraft limit exceeded: requested {requested}, available {available}",
            code=ErrorKind.OVERDRAFT_EXCEEDED.value,
        )


class UnsupportedCapabilityError(AppError):
    """Operation requested on an account kind that does not offer it."""

    def __init__(self, name: str, capability: str = "interest calculation"):
        super().__init__(
            f"Account '{name}' does not support {capability}",
            code=ErrorKind.UNSUPPORTED_CAPABILITY.value,
        )
