"""Exception hierarchy for flag evaluation and flag metadata access."""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Error codes reported alongside a failed flag evaluation."""

    PROVIDER_NOT_READY = "PROVIDER_NOT_READY"
    FLAG_NOT_FOUND = "FLAG_NOT_FOUND"
    PARSE_ERROR = "PARSE_ERROR"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    TARGETING_KEY_MISSING = "TARGETING_KEY_MISSING"
    INVALID_CONTEXT = "INVALID_CONTEXT"
    GENERAL = "GENERAL"


class FlagSDKError(Exception):
    """Base exception for all flagsdk errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.GENERAL,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.original_error = original_error

    def __str__(self) -> str:
        return self.message


class GeneralError(FlagSDKError):
    """Raised for failures that have no more specific error code."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message, ErrorCode.GENERAL, original_error=original_error)


class ParseError(FlagSDKError):
    """Raised when a value cannot be read as the requested type."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message, ErrorCode.PARSE_ERROR, original_error=original_error)


class MetadataNotFoundError(GeneralError):
    """Raised when a flag metadata key has no entry."""

    def __init__(self, key: str):
        super().__init__(f"key {key} does not exist in metadata")
        self.key = key


class MetadataTypeMismatchError(ParseError):
    """Raised when a flag metadata entry exists but holds a different kind."""

    def __init__(self, key: str, expected: str, actual: str):
        super().__init__(
            f"wrong type for key {key}. Expected {expected} but got {actual}"
        )
        self.key = key
        self.expected = expected
        self.actual = actual
