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

"""
iTunes lookup fetcher for storeversion.

Queries the public App Store lookup endpoint for a bundle identifier and
decodes the first result into ReleaseMetadata. No credentials are needed.

Endpoint:
    https://itunes.apple.com/{country}/lookup?bundleId={bundle_id}&t={timestamp}

    The ``t`` parameter is a cache-busting timestamp (seconds since the
    epoch), so intermediate caches never serve a stale version.

Response (abridged):
    {
      "resultCount": 1,
      "results": [
        {
          "version": "1.0.1",
          "releaseNotes": "Bug fixes",
          "trackName": "MyApp",
          ...
        }
      ]
    }

Workflow:
    1. Validate inputs and build the lookup URL
    2. GET the URL in a worker thread (asyncio.to_thread) with a timeout
    3. Reject non-2xx statuses
    4. Decode JSON, require a "results" list
    5. Return the first result as ReleaseMetadata

Error Handling:
    - InvalidRequestError: blank bundle id, bad country code, unpreparable URL
    - NetworkError: connection errors, timeouts, non-2xx statuses
    - DecodeError: invalid JSON, missing "results", wrongly typed fields
    - NoResultsError: empty "results"
    - Errors are chained with 'from err' for better debugging

Example:
    From Python:

        import asyncio
        from storeversion.lookup.itunes import ItunesLookupFetcher

        fetcher = ItunesLookupFetcher(timeout=10)
        metadata = asyncio.run(fetcher.fetch("com.example.app", "us"))
        print(metadata.version)

Notes:
- Only the first record is used; the store may return more than one
- Requests are never retried here; retry policy belongs to the caller
"""

from __future__ import annotations

import asyncio
import json
import re
import time
from typing import Any, Callable

import requests

from storeversion.exceptions import (
    DecodeError,
    InvalidRequestError,
    NetworkError,
    NoResultsError,
)
from storeversion.logging import get_global_logger

from .base import ReleaseMetadata

DEFAULT_BASE_URL = "https://itunes.apple.com"
DEFAULT_TIMEOUT = 30

_COUNTRY_CODE = re.compile(r"[A-Za-z]{2}")
_WHITESPACE = re.compile(r"\s")


def build_lookup_url(
    country: str,
    bundle_id: str,
    timestamp: float,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """Build the lookup URL for a bundle identifier.

    Args:
        country: Two-letter store country code (e.g., "us", "br").
        bundle_id: Bundle identifier of the app.
        timestamp: Cache-busting value sent as the ``t`` query parameter.
        base_url: Scheme and host of the lookup service.

    Returns:
        The fully encoded lookup URL.

    Raises:
        InvalidRequestError: If the bundle id is blank or contains whitespace,
            if the country is not a two-letter code, or if requests cannot
            prepare the resulting URL.

    Example:
        >>> build_lookup_url("gb", "com.company.App", 1.5)
        'https://itunes.apple.com/gb/lookup?bundleId=com.company.App&t=1.5'
    """
    if not bundle_id or _WHITESPACE.search(bundle_id):
        raise InvalidRequestError(f"Invalid URL configuration: bundle id {bundle_id!r}")
    if not _COUNTRY_CODE.fullmatch(country or ""):
        raise InvalidRequestError(f"Invalid URL configuration: country {country!r}")

    try:
        prepared = requests.Request(
            "GET",
            f"{base_url.rstrip('/')}/{country}/lookup",
            params={"bundleId": bundle_id, "t": timestamp},
        ).prepare()
    except (requests.exceptions.RequestException, ValueError) as err:
        raise InvalidRequestError(f"Invalid URL configuration: {err}") from err
    return prepared.url


class ItunesLookupFetcher:
    """Metadata fetcher backed by the public App Store lookup endpoint.

    Args:
        base_url: Scheme and host of the lookup service.
        timeout: Per-request timeout in seconds.
        clock: Source of the cache-busting timestamp.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._clock = clock

    async def fetch(self, bundle_id: str, country: str) -> ReleaseMetadata:
        """Look up a bundle identifier and return its first record's metadata.

        Raises:
            InvalidRequestError, NetworkError, DecodeError, NoResultsError.
        """
        url = build_lookup_url(
            country, bundle_id, self._clock(), base_url=self.base_url
        )
        return await asyncio.to_thread(self._fetch_sync, url)

    def _fetch_sync(self, url: str) -> ReleaseMetadata:
        logger = get_global_logger()

        logger.verbose("LOOKUP", f"GET {url}")
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as err:
            raise NetworkError(err) from err

        if not 200 <= response.status_code < 300:
            raise NetworkError(
                f"bad server response: HTTP {response.status_code} {response.reason}"
            )
        logger.verbose("LOOKUP", f"Response: {response.status_code} {response.reason}")

        try:
            payload = response.json()
        except ValueError as err:
            raise DecodeError(
                f"invalid JSON from lookup endpoint: {response.text[:200]!r}"
            ) from err

        logger.debug("LOOKUP", f"Payload: {json.dumps(payload, indent=2)}")

        return _first_result(payload)


def _first_result(payload: Any) -> ReleaseMetadata:
    """Decode the first entry of a lookup payload's "results" list."""
    if not isinstance(payload, dict) or not isinstance(payload.get("results"), list):
        raise DecodeError("lookup response has no 'results' list")

    results = payload["results"]
    if not results:
        raise NoResultsError()
    return ReleaseMetadata.from_record(results[0])
