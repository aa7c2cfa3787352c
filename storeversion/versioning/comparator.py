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

"""Core version comparison utilities for storeversion.

This module is pure: it does NOT perform network or file I/O. It only
parses and compares store version strings.

Versions are read as major.minor.patch. Only the first three dot-separated
segments count; each segment contributes its leading digits (0 when it has
none) and missing segments count as 0. Parsing never fails, so arbitrary
input still yields a deterministic answer.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Literal

UpdateKind = Literal["major", "minor", "patch"]

_LEADING_DIGITS = re.compile(r"[0-9]+")


# ----------------------------
# Outcome DTO
# ----------------------------


@dataclass(frozen=True)
class ComparisonOutcome:
    """Result of comparing a current version with an available version.

    Attributes:
        kind: Which component the available version is newer in ("major",
            "minor" or "patch"), or None when no new version is available.

    """

    kind: UpdateKind | None = None

    @classmethod
    def new_version(cls, kind: UpdateKind) -> ComparisonOutcome:
        return cls(kind=kind)

    @property
    def is_new_version(self) -> bool:
        return self.kind is not None

    def __str__(self) -> str:
        return self.kind or "none"


NO_NEW_VERSION = ComparisonOutcome()


# ----------------------------
# Parsing
# ----------------------------


def _segment_value(segment: str) -> int:
    """Return the integer value of a segment's leading digits (0 if none).

    Digit runs too long for int() (sys.get_int_max_str_digits) count as 0.
    """
    m = _LEADING_DIGITS.match(segment)
    if not m:
        return 0
    try:
        return int(m.group(0))
    except ValueError:
        return 0


def parse_version(text: str) -> tuple[int, int, int]:
    """Parse a version string into a (major, minor, patch) triple.

    Examples:
        >>> parse_version("1.2.3")
        (1, 2, 3)
        >>> parse_version("2")
        (2, 0, 0)
        >>> parse_version("1.4b.x.9")
        (1, 4, 0)
    """
    nums = [_segment_value(p) for p in text.split(".")[:3]]
    nums += [0] * (3 - len(nums))
    return nums[0], nums[1], nums[2]


# ----------------------------
# Comparison
# ----------------------------


def compare_versions(current: str, available: str) -> ComparisonOutcome:
    """Classify whether 'available' is a newer release than 'current'.

    Components are compared most significant first; the first component that
    differs decides the outcome.

    Args:
        current: Version the caller is running (e.g., "1.0", "1.0.0").
        available: Version reported by the store (e.g., "1.1.0").

    Returns:
        ComparisonOutcome.new_version("major" | "minor" | "patch") when
        'available' is newer, NO_NEW_VERSION when it is the same or older.

    Example:
        >>> compare_versions("1.9", "1.10")
        ComparisonOutcome(kind='minor')
        >>> compare_versions("2.0.0", "1.9.9") == NO_NEW_VERSION
        True
    """
    cur = parse_version(current)
    avail = parse_version(available)
    kinds: tuple[UpdateKind, ...] = ("major", "minor", "patch")

    for kind, c, a in zip(kinds, cur, avail):
        if a > c:
            return ComparisonOutcome.new_version(kind)
        if a < c:
            return NO_NEW_VERSION
    return NO_NEW_VERSION


def is_new_version_available(current: str, available: str) -> bool:
    """Return True iff compare_versions() reports a new version."""
    return compare_versions(current, available) != NO_NEW_VERSION
