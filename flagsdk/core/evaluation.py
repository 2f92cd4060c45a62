"""Flag evaluation result structures."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from .exceptions import ErrorCode, FlagSDKError
from .metadata import FlagMetadata

T = TypeVar("T")


class Reason(Enum):
    """Why a flag evaluation resolved to its value."""

    STATIC = "STATIC"
    DEFAULT = "DEFAULT"
    TARGETING_MATCH = "TARGETING_MATCH"
    SPLIT = "SPLIT"
    CACHED = "CACHED"
    DISABLED = "DISABLED"
    UNKNOWN = "UNKNOWN"
    STALE = "STALE"
    ERROR = "ERROR"


@dataclass
class ProviderEvaluation(Generic[T]):
    """Result returned by a provider for a single flag resolution."""

    value: T
    variant: Optional[str] = None
    reason: Optional[Reason] = None
    error_code: Optional[ErrorCode] = None
    error_message: Optional[str] = None
    flag_metadata: FlagMetadata = field(default_factory=FlagMetadata.empty)


@dataclass
class FlagEvaluationDetails(Generic[T]):
    """Evaluation result handed back to the caller."""

    flag_key: str
    value: T
    variant: Optional[str] = None
    reason: Optional[Reason] = None
    error_code: Optional[ErrorCode] = None
    error_message: Optional[str] = None
    flag_metadata: FlagMetadata = field(default_factory=FlagMetadata.empty)

    @property
    def is_error(self) -> bool:
        """Whether the evaluation failed."""
        return self.error_code is not None

    @classmethod
    def from_provider_evaluation(
        cls, flag_key: str, evaluation: ProviderEvaluation[T]
    ) -> "FlagEvaluationDetails[T]":
        """Build caller-facing details from a provider result."""
        return cls(
            flag_key=flag_key,
            value=evaluation.value,
            variant=evaluation.variant,
            reason=evaluation.reason,
            error_code=evaluation.error_code,
            error_message=evaluation.error_message,
            flag_metadata=evaluation.flag_metadata,
        )

    @classmethod
    def from_error(
        cls, flag_key: str, default_value: T, error: FlagSDKError
    ) -> "FlagEvaluationDetails[T]":
        """Details for an evaluation that fell back to the default value."""
        return cls(
            flag_key=flag_key,
            value=default_value,
            reason=Reason.ERROR,
            error_code=error.error_code,
            error_message=error.message,
        )

    def to_dict(self) -> dict:
        """Convert details to a dictionary for logging."""
        return {
            "flag_key": self.flag_key,
            "value": self.value,
            "variant": self.variant,
            "reason": self.reason.value if self.reason else None,
            "error_code": self.error_code.value if self.error_code else None,
            "error_message": self.error_message,
            "flag_metadata": self.flag_metadata.to_dict(),
        }
