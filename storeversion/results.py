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

"""Public API return types for storeversion.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        import asyncio
        from storeversion.core import check_release_available
        from storeversion.results import ReleaseAvailableResult

        result: ReleaseAvailableResult = asyncio.run(
            check_release_available("com.example.app", "1.0.0", "us")
        )
        if result.is_new_version:
            print(f"{result.metadata.app_name} {result.metadata.version}")
        ```

Note:
    Only public API return types belong in this module. Domain types
    (like ReleaseMetadata and ComparisonOutcome) remain co-located with
    their related logic.
"""

from __future__ import annotations

from dataclasses import dataclass

from storeversion.lookup.base import ReleaseMetadata
from storeversion.versioning import ComparisonOutcome


@dataclass(frozen=True)
class ReleaseAvailableResult:
    """Result from checking the store for a newer release.

    A result is returned whether or not the store version is newer; the
    outcome says which.

    Attributes:
        metadata: Release metadata reported by the store, verbatim.
        outcome: Comparison of the caller's version with metadata.version.
    """

    metadata: ReleaseMetadata
    outcome: ComparisonOutcome

    @property
    def is_new_version(self) -> bool:
        return self.outcome.is_new_version
