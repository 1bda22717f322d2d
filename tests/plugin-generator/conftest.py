"""Shared fixtures for plugin-generator tests."""

import os
import sys

import pytest

# Make FakeWpCli importable from tests/scaffold-cmd/
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "scaffold-cmd"))

from fake_wp_cli import FakeWpCli  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "plugin-generator" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def fake_wp_cli():
    return FakeWpCli()
