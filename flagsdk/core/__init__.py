"""Core flag evaluation types."""

from .evaluation import FlagEvaluationDetails, ProviderEvaluation, Reason
from .exceptions import (
    ErrorCode,
    FlagSDKError,
    GeneralError,
    MetadataNotFoundError,
    MetadataTypeMismatchError,
    ParseError,
)
from .metadata import (
    FlagMetadata,
    FlagMetadataBuilder,
    MetadataValue,
    MetadataValueKind,
    builder,
)

__all__ = [
    "FlagMetadata",
    "FlagMetadataBuilder",
    "MetadataValue",
    "MetadataValueKind",
    "builder",
    "FlagEvaluationDetails",
    "ProviderEvaluation",
    "Reason",
    "ErrorCode",
    "FlagSDKError",
    "GeneralError",
    "ParseError",
    "MetadataNotFoundError",
    "MetadataTypeMismatchError",
]
