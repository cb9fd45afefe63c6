"""Application-level exceptions."""

from walletdash.domain.models.enums import TransferErrorKind


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigurationError(AppError):
    """Raised when required credentials are missing or malformed."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")


class FetchError(AppError):
    """Raised when an HTTP endpoint keeps failing after all retry attempts."""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(f"Request to {url} failed: {reason}", code="FETCH_ERROR")


class ExplorerError(AppError):
    """Raised when the block explorer answers with an error payload."""

    def __init__(self, message: str):
        super().__init__(message, code="EXPLORER_ERROR")


class ChainError(AppError):
    """Raised by the chain client; carries a classified error kind."""

    def __init__(self, message: str, kind: TransferErrorKind = TransferErrorKind.UNKNOWN):
        self.kind = kind
        super().__init__(message, code="CHAIN_ERROR")
