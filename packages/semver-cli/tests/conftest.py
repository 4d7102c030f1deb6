# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

ENV_VARS = (
    "SEMVER_TAG_PREFIX",
    "SEMVER_PENDING_BRANCH_PREFIX",
    "SEMVER_RELEASE_BRANCH_PREFIX",
    "SEMVER_DEFAULT_CHANNEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove release configuration inherited from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()
