"""
storeversion - App Store release checker

Checks whether a newer release of an app is available in the App Store by
querying the public lookup endpoint and comparing the store version with
the version the caller is running.

storeversion provides:
  - major/minor/patch classification of version differences
  - An async release checker with a typed error taxonomy
  - A reference fetcher for the public App Store lookup endpoint
  - YAML configuration and a small CLI

Quick Start
-----------
Check for a newer release:

    $ storeversion check com.example.app 1.0.0

Compare two versions offline:

    $ storeversion compare 1.9 1.10

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
core : module
    Release check orchestration.
config : package
    YAML configuration loading and merging.
lookup : package
    Store metadata fetchers.
versioning : package
    Version parsing and comparison.

Public API
----------
    from storeversion.core import ReleaseAvailabilityChecker, check_release_available
    from storeversion.versioning import compare_versions, is_new_version_available
    from storeversion.exceptions import CheckError

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "Check the App Store for a newer release of an app"

# Re-export commonly used functions for convenience
from storeversion.core import ReleaseAvailabilityChecker, check_release_available
from storeversion.exceptions import CheckError, StoreVersionError
from storeversion.lookup import ReleaseMetadata
from storeversion.results import ReleaseAvailableResult
from storeversion.versioning import (
    NO_NEW_VERSION,
    ComparisonOutcome,
    compare_versions,
    is_new_version_available,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "ReleaseAvailabilityChecker",
    "check_release_available",
    "CheckError",
    "StoreVersionError",
    "ReleaseMetadata",
    "ReleaseAvailableResult",
    "NO_NEW_VERSION",
    "ComparisonOutcome",
    "compare_versions",
    "is_new_version_available",
]
