"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class InsufficientSharesError(ValidationError):
    """Raised when attempting to sell more shares than owned."""

    def __init__(self, symbol: str, requested: str, available: str):
        super().__init__(
            f"Insufficient shares of {symbol}: requested {requested}, available {available}",
            code="INSUFFICIENT_SHARES",
        )


class NoDataError(AppError):
    """Raised when a comparison is requested but no snapshots are stored."""

    def __init__(self, message: str = "No snapshot data found"):
        super().__init__(message, code="NO_DATA")


class MalformedDataError(AppError):
    """Raised when a persisted record lacks required fields."""

    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f"Malformed data in {source}: {reason}", code="MALFORMED_DATA")
