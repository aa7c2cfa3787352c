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

"""Metadata fetcher protocol and release metadata DTO for storeversion.

A metadata fetcher is the collaborator that talks to the store. Given a
bundle identifier and a country code it returns the release metadata of the
first matching record, or raises one of the typed check errors.

Design Philosophy:
    - Fetchers are Protocol classes (structural subtyping, not inheritance)
    - The release checker depends only on this protocol, so tests and
      applications can plug in their own fetcher
    - Fetchers do not retry; retry policy belongs to the caller

Example:
    Implementing a custom fetcher:
        ```python
        from storeversion.lookup.base import ReleaseMetadata

        class StaticFetcher:
            async def fetch(self, bundle_id: str, country: str) -> ReleaseMetadata:
                return ReleaseMetadata(version="2.0.0", app_name="MyApp")
        ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from storeversion.exceptions import DecodeError

# -------------------------------
# Release metadata
# -------------------------------


@dataclass(frozen=True)
class ReleaseMetadata:
    """Release information decoded from a store lookup record.

    Every field is optional because the store may omit any of them.

    Attributes:
        version: Version string of the release available in the store.
        release_notes: Release notes of that version.
        app_name: Display name of the app (``trackName`` upstream).

    """

    version: str | None = None
    release_notes: str | None = None
    app_name: str | None = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> ReleaseMetadata:
        """Decode a lookup result record.

        Args:
            record: One entry of the lookup response's ``results`` list.

        Returns:
            The decoded metadata. Absent or null keys decode as None.

        Raises:
            DecodeError: If the record is not an object, or if one of the
                decoded keys holds a non-string value.
        """
        if not isinstance(record, dict):
            raise DecodeError(f"lookup result is not an object: {record!r}")

        values: dict[str, str | None] = {}
        for field_name, key in (
            ("version", "version"),
            ("release_notes", "releaseNotes"),
            ("app_name", "trackName"),
        ):
            value = record.get(key)
            if value is not None and not isinstance(value, str):
                raise DecodeError(
                    f"expected a string for {key!r}, got {type(value).__name__}"
                )
            values[field_name] = value
        return cls(**values)


# -------------------------------
# Fetcher protocol
# -------------------------------


class MetadataFetcher(Protocol):
    """Protocol for store metadata fetchers."""

    async def fetch(self, bundle_id: str, country: str) -> ReleaseMetadata:
        """Look up the release metadata for a bundle identifier.

        Args:
            bundle_id: Bundle identifier of the app (e.g., "com.example.app").
            country: Two-letter store country code (e.g., "us").

        Returns:
            Metadata of the first record the store returned.

        Raises:
            InvalidRequestError: If no request can be built from the inputs.
            NetworkError: On transport failures and non-2xx statuses.
            DecodeError: If the payload cannot be decoded.
            NoResultsError: If the store returned zero records.

        Note:
            Implementations should honor a request timeout and let
            asyncio.CancelledError propagate.
        """
        ...
