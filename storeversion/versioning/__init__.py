"""
Version comparison utilities for storeversion.

This package compares the version a caller is running with the version the
store reports and classifies the difference.

Modules
-------
comparator : module
    major.minor.patch parsing and comparison.

Public API
----------
ComparisonOutcome : dataclass
    Classified result: no new version, or a new major/minor/patch version.
NO_NEW_VERSION : ComparisonOutcome
    The outcome for "same or older".
UpdateKind : Literal type
    "major", "minor" or "patch".
parse_version : function
    Parse a version string into a (major, minor, patch) triple.
compare_versions : function
    Compare a current and an available version.
is_new_version_available : function
    True when compare_versions() reports a new version.

Examples
--------
    >>> from storeversion.versioning import compare_versions, is_new_version_available
    >>> compare_versions("1.0.0", "1.0.1")
    ComparisonOutcome(kind='patch')
    >>> is_new_version_available("1.0", "1.0.0")
    False

Notes
-----
- Comparison is numeric, not lexicographic: "1.10" is newer than "1.9"
- Only three components are considered: "1.0.0.5" equals "1.0.0"
- Malformed input never raises; unparsable components count as 0
"""

from .comparator import (
    NO_NEW_VERSION,
    ComparisonOutcome,
    UpdateKind,
    compare_versions,
    is_new_version_available,
    parse_version,
)

__all__ = [
    "NO_NEW_VERSION",
    "ComparisonOutcome",
    "UpdateKind",
    "compare_versions",
    "is_new_version_available",
    "parse_version",
]
