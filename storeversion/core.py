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

"""Core orchestration for storeversion.

This module turns a store metadata lookup into a classified release check.
It is the main entry point for programmatic use.

Check Workflow:

1. Fetch release metadata for the bundle id through a MetadataFetcher
   (the only suspension point)
2. Require a non-empty version in the metadata
3. Compare the caller's version with the store version
4. Return ReleaseAvailableResult(metadata, outcome), whatever the outcome

Failure Handling:

- Fetcher failures that are already CheckError subclasses propagate unchanged
- requests transport exceptions, timeouts (TimeoutError, asyncio.TimeoutError)
  and connectivity failures (ConnectionError) are wrapped in NetworkError
- Any other exception from the fetcher is wrapped in GeneralError
- A record without a version raises NoAppInformationAvailableError
- Nothing is retried or recovered locally

The checker holds no mutable state; one instance can serve any number of
concurrent checks.

Example:
    Programmatic usage:
        ```python
        import asyncio
        from storeversion.core import check_release_available

        result = asyncio.run(
            check_release_available("com.example.app", "1.0.0", "us")
        )
        print(f"Store version: {result.metadata.version}")
        print(f"Update: {result.outcome}")  # "major", "minor", "patch" or "none"
        ```

"""

from __future__ import annotations

import asyncio

import requests

from storeversion.exceptions import (
    CheckError,
    GeneralError,
    NetworkError,
    NoAppInformationAvailableError,
)
from storeversion.lookup import ItunesLookupFetcher, MetadataFetcher
from storeversion.results import ReleaseAvailableResult
from storeversion.versioning import compare_versions

_NETWORK_ERRORS = (
    requests.exceptions.RequestException,
    TimeoutError,
    asyncio.TimeoutError,
    ConnectionError,
)


class ReleaseAvailabilityChecker:
    """Check whether the store has a newer release than the caller's.

    Args:
        fetcher: Collaborator used to look up release metadata. Defaults to
            ItunesLookupFetcher().
    """

    def __init__(self, fetcher: MetadataFetcher | None = None) -> None:
        self.fetcher = fetcher if fetcher is not None else ItunesLookupFetcher()

    async def check(
        self, bundle_id: str, current_version: str, country: str
    ) -> ReleaseAvailableResult:
        """Look up the store release of an app and compare it with ours.

        Args:
            bundle_id: Bundle identifier of the app (e.g., "com.example.app").
            current_version: Version the caller is running (e.g., "1.0.0").
            country: Two-letter store country code (e.g., "us").

        Returns:
            The store metadata paired with the comparison outcome. A result
            is returned even when the store version is not newer; check
            ``result.outcome`` (or ``result.is_new_version``).

        Raises:
            InvalidRequestError: If no lookup request can be built.
            NetworkError: On transport failures, timeouts, connectivity
                failures and non-2xx statuses.
            DecodeError: If the lookup payload cannot be decoded.
            NoResultsError: If the store has no record for the bundle id.
            NoAppInformationAvailableError: If the record has no version.
            GeneralError: If the fetcher fails in any other way.
        """
        try:
            metadata = await self.fetcher.fetch(bundle_id, country)
        except CheckError:
            raise
        except _NETWORK_ERRORS as err:
            raise NetworkError(err) from err
        except Exception as err:
            raise GeneralError(err) from err

        if not metadata.version:
            raise NoAppInformationAvailableError()

        outcome = compare_versions(current_version, metadata.version)
        return ReleaseAvailableResult(metadata=metadata, outcome=outcome)


async def check_release_available(
    bundle_id: str,
    current_version: str,
    country: str = "us",
    *,
    fetcher: MetadataFetcher | None = None,
) -> ReleaseAvailableResult:
    """Check the store for a newer release of an app.

    Convenience wrapper around ReleaseAvailabilityChecker(fetcher).check().

    Args:
        bundle_id: Bundle identifier of the app.
        current_version: Version the caller is running.
        country: Two-letter store country code. Default is "us".
        fetcher: Metadata fetcher to use. Defaults to ItunesLookupFetcher().

    Returns:
        The store metadata and comparison outcome.

    Raises:
        CheckError: One of its subclasses, see ReleaseAvailabilityChecker.check().
    """
    checker = ReleaseAvailabilityChecker(fetcher)
    return await checker.check(bundle_id, current_version, country)
