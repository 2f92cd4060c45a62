"""Tests for the exception hierarchy."""

import pytest

from flagsdk import (
    ErrorCode,
    FlagSDKError,
    GeneralError,
    MetadataNotFoundError,
    MetadataTypeMismatchError,
    ParseError,
)


def test_base_error_defaults_to_general():
    error = FlagSDKError("boom")

    assert error.error_code == ErrorCode.GENERAL
    assert error.message == "boom"
    assert error.original_error is None
    assert str(error) == "boom"


def test_original_error_is_kept():
    cause = ValueError("bad")
    error = ParseError("cannot parse", original_error=cause)

    assert error.original_error is cause
    assert error.error_code == ErrorCode.PARSE_ERROR


def test_metadata_errors_share_base():
    assert issubclass(MetadataNotFoundError, GeneralError)
    assert issubclass(MetadataTypeMismatchError, ParseError)

    with pytest.raises(FlagSDKError):
        raise MetadataNotFoundError("k")
    with pytest.raises(FlagSDKError):
        raise MetadataTypeMismatchError("k", "Integer", "String")


def test_not_found_message():
    assert str(MetadataNotFoundError("ruleIndex")) == "key ruleIndex does not exist in metadata"
