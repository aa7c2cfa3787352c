# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Exception hierarchy for storeversion.

This module defines a custom exception hierarchy that allows library users
to distinguish between different kinds of failure:

- ConfigError: Configuration file problems (YAML parse, invalid values)
- CheckError: Base of the release check taxonomy. Its subclasses are the
  only failures a release check ever reports:

    - InvalidRequestError: the lookup URL could not be built from the inputs
    - NoResultsError: the store returned zero records for the bundle id
    - NoAppInformationAvailableError: a record was found without a version
    - NetworkError: transport failure (timeout, connectivity, non-2xx status)
    - DecodeError: the payload could not be decoded into release metadata
    - GeneralError: any other failure raised by a metadata fetcher

All exceptions inherit from StoreVersionError, allowing users to catch every
storeversion error with a single except clause if needed.

Check errors compare equal when they are of the same class and carry the
same description. Wrapped failures keep only the description of their
underlying cause (``cause``); the original exception stays reachable through
``__cause__`` when it was raised with ``from err``.

Example:
    Catching specific error types:
        ```python
        import asyncio
        from storeversion.core import check_release_available
        from storeversion.exceptions import NetworkError, NoResultsError

        try:
            result = asyncio.run(
                check_release_available("com.example.app", "1.0.0", "us")
            )
        except NoResultsError:
            print("Unknown bundle id")
        except NetworkError as e:
            print(f"Network error: {e.cause}")
        ```
"""

from __future__ import annotations

__all__ = [
    "StoreVersionError",
    "ConfigError",
    "CheckError",
    "InvalidRequestError",
    "NoResultsError",
    "NoAppInformationAvailableError",
    "NetworkError",
    "DecodeError",
    "GeneralError",
]


class StoreVersionError(Exception):
    """Base exception for all storeversion errors.

    All storeversion-specific exceptions inherit from this class, allowing
    users to catch all of them with a single except clause if needed.
    """

    pass


class ConfigError(StoreVersionError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - A config file that was asked for but does not exist
    - YAML parsing (syntax errors, empty file, non-mapping top level)
    - Invalid values for known settings (e.g., a negative timeout)
    """

    pass


class CheckError(StoreVersionError):
    """Base class for failures reported by a release check.

    Attributes:
        description: Human-readable description of the failure. Two check
            errors are equal when they share a class and a description.
    """

    default_description = "Release check failed"

    def __init__(self, description: str | None = None) -> None:
        self.description = description or self.default_description
        super().__init__(self.description)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheckError):
            return NotImplemented
        return type(self) is type(other) and self.description == other.description

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.description))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


class InvalidRequestError(CheckError):
    """Raised when the lookup request cannot be built from the inputs."""

    default_description = "Invalid URL configuration"


class NoResultsError(CheckError):
    """Raised when the store returns zero records for a bundle identifier."""

    default_description = "No app results found"


class NoAppInformationAvailableError(CheckError):
    """Raised when a record was found but carries no usable version."""

    default_description = "No app information available"


class _WrappedCheckError(CheckError):
    """Check error that wraps the description of an underlying failure.

    Attributes:
        cause: Description of the wrapped failure (e.g., ``str(err)``).
    """

    prefix = "Error"

    def __init__(self, cause: object) -> None:
        self.cause = str(cause)
        super().__init__(f"{self.prefix}: {self.cause}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cause={self.cause!r})"


class NetworkError(_WrappedCheckError):
    """Raised for transport failures.

    This exception is raised when there are problems with:

    - Connection failures and timeouts
    - Non-success (non-2xx) HTTP statuses from the lookup endpoint
    """

    prefix = "Network error"


class DecodeError(_WrappedCheckError):
    """Raised when the lookup payload cannot be decoded."""

    prefix = "Failed to decode response"


class GeneralError(_WrappedCheckError):
    """Raised for unexpected failures propagated by a metadata fetcher."""

    prefix = "General error"
