"""
Pytest configuration and shared fixtures for storeversion tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from storeversion.logging import SilentLogger, set_global_logger
from storeversion.lookup import ReleaseMetadata


class FakeFetcher:
    """
    Metadata fetcher test double.

    Records every call and either returns `metadata` or raises `error`.
    """

    def __init__(
        self,
        metadata: ReleaseMetadata | None = None,
        error: BaseException | None = None,
    ) -> None:
        self.metadata = metadata
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def fetch(self, bundle_id: str, country: str) -> ReleaseMetadata:
        self.calls.append((bundle_id, country))
        if self.error is not None:
            raise self.error
        assert self.metadata is not None
        return self.metadata


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Reset the global logger after each test (the CLI replaces it)."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_metadata() -> ReleaseMetadata:
    """Provide release metadata for a patch release."""
    return ReleaseMetadata(
        version="1.0.1",
        release_notes="Bug fixes",
        app_name="MyApp",
    )


@pytest.fixture
def fake_fetcher_factory():
    """
    Factory fixture for FakeFetcher instances.

    Usage:
        fetcher = fake_fetcher_factory(metadata=ReleaseMetadata(version="1.0"))
        fetcher = fake_fetcher_factory(error=NoResultsError())
    """
    return FakeFetcher


@pytest.fixture
def lookup_payload() -> dict[str, Any]:
    """
    Provide a lookup endpoint response body with one result.

    Trimmed to the keys storeversion reads plus a few it ignores.
    """
    return {
        "resultCount": 1,
        "results": [
            {
                "trackId": 123456789,
                "bundleId": "com.example.app",
                "trackName": "MyApp",
                "version": "1.0.1",
                "releaseNotes": "Bug fixes",
                "currentVersionReleaseDate": "2026-01-15T08:00:00Z",
            }
        ],
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
