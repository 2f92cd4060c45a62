"""
flagsdk - Feature flag evaluation result model.

This package provides the immutable, typed metadata container that providers
attach to flag evaluation results, together with the result structures that
carry it.
"""

from .core.evaluation import FlagEvaluationDetails, ProviderEvaluation, Reason
from .core.exceptions import (
    ErrorCode,
    FlagSDKError,
    GeneralError,
    MetadataNotFoundError,
    MetadataTypeMismatchError,
    ParseError,
)
from .core.metadata import (
    FlagMetadata,
    FlagMetadataBuilder,
    MetadataValue,
    MetadataValueKind,
    builder,
)
from .core.observability import LoggingConfig, setup_logging

__version__ = "0.1.0"

__all__ = [
    # Metadata
    "FlagMetadata",
    "FlagMetadataBuilder",
    "MetadataValue",
    "MetadataValueKind",
    "builder",
    # Evaluation results
    "FlagEvaluationDetails",
    "ProviderEvaluation",
    "Reason",
    # Exceptions
    "ErrorCode",
    "FlagSDKError",
    "GeneralError",
    "ParseError",
    "MetadataNotFoundError",
    "MetadataTypeMismatchError",
    # Logging
    "LoggingConfig",
    "setup_logging",
]
