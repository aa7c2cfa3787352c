"""
Tests for storeversion.exceptions module.

Tests the check error taxonomy including:
- Default descriptions
- Equality by class and description
- Wrapped causes
- Hierarchy
"""

from __future__ import annotations

import pytest

from storeversion.exceptions import (
    CheckError,
    ConfigError,
    DecodeError,
    GeneralError,
    InvalidRequestError,
    NetworkError,
    NoAppInformationAvailableError,
    NoResultsError,
    StoreVersionError,
)


class TestDescriptions:
    """Tests for human-readable descriptions."""

    @pytest.mark.parametrize(
        "error, text",
        [
            (InvalidRequestError(), "Invalid URL configuration"),
            (NoResultsError(), "No app results found"),
            (NoAppInformationAvailableError(), "No app information available"),
            (NetworkError("timed out"), "Network error: timed out"),
            (DecodeError("bad json"), "Failed to decode response: bad json"),
            (GeneralError("boom"), "General error: boom"),
        ],
    )
    def test_str_is_description(self, error, text):
        """Test that str() and .description agree with the taxonomy."""
        assert error.description == text
        assert str(error) == text

    def test_wrapped_cause_is_string(self):
        """Test that wrapped errors keep only the cause description."""
        err = NetworkError(TimeoutError("read timed out"))
        assert err.cause == "read timed out"


class TestEquality:
    """Tests for equality by description."""

    def test_same_class_same_description_equal(self):
        """Test that equal descriptions make equal errors."""
        assert NoResultsError() == NoResultsError()
        assert NetworkError("offline") == NetworkError(OSError("offline"))

    def test_different_description_not_equal(self):
        """Test that different causes make different errors."""
        assert NetworkError("offline") != NetworkError("timed out")

    def test_different_class_not_equal(self):
        """Test that the class is part of the identity."""
        assert DecodeError("x") != GeneralError("x")
        assert NoResultsError() != NoAppInformationAvailableError()

    def test_hashable(self):
        """Test that equal errors hash alike."""
        assert len({NoResultsError(), NoResultsError(), NetworkError("a")}) == 2

    def test_not_equal_to_other_types(self):
        """Test comparison against unrelated objects."""
        assert NoResultsError() != "No app results found"


class TestHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "cls",
        [
            InvalidRequestError,
            NoResultsError,
            NoAppInformationAvailableError,
            NetworkError,
            DecodeError,
            GeneralError,
        ],
    )
    def test_check_errors(self, cls):
        """Test that every check failure is a CheckError."""
        assert issubclass(cls, CheckError)
        assert issubclass(cls, StoreVersionError)

    def test_config_error_is_not_check_error(self):
        """Test that configuration errors sit outside the check taxonomy."""
        assert issubclass(ConfigError, StoreVersionError)
        assert not issubclass(ConfigError, CheckError)
