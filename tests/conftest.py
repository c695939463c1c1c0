"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from typings_worker.config import WorkerConfig
from typings_worker.core.types_registry import types_registry_file_location
from typings_worker.integrations.log.fake import FakeLog

CACHE_DIR = Path("/cache")
REGISTRY_ENTRIES = {
    "lodash": {"latest": "4.14.202", "ts5.0": "4.14.202"},
    "express": {"latest": "4.17.21"},
}


@pytest.fixture
def fake_log() -> FakeLog:
    """Create a fresh enabled FakeLog."""
    return FakeLog()


@pytest.fixture
def registry_files() -> dict[Path, str]:
    """A cached types-registry index.json under CACHE_DIR."""
    return {
        types_registry_file_location(CACHE_DIR): json.dumps({"entries": REGISTRY_ENTRIES}),
    }


@pytest.fixture
def worker_config() -> WorkerConfig:
    """Configuration with an explicit npm location so PATH is never searched."""
    return WorkerConfig(global_cache_location=CACHE_DIR, log_file=None, npm_location="npm")
