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

"""Store metadata lookup for storeversion.

This package holds the collaborator that fetches release metadata from the
store, and the protocol the release checker expects of it.

Available fetchers:

- ItunesLookupFetcher: public App Store lookup endpoint (itunes.apple.com)

Public API:

- MetadataFetcher: Protocol for fetchers
- ReleaseMetadata: Decoded release record (version, release notes, app name)
- ItunesLookupFetcher: Default fetcher
- build_lookup_url: Build the App Store lookup URL for a bundle id
"""

from .base import MetadataFetcher, ReleaseMetadata
from .itunes import ItunesLookupFetcher, build_lookup_url

__all__ = [
    "ItunesLookupFetcher",
    "MetadataFetcher",
    "ReleaseMetadata",
    "build_lookup_url",
]
