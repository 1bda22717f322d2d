"""Shared fixtures for scaffold-cmd tests."""

import os
import sys

import pytest

# Make fakes importable from other test directories as well
sys.path.insert(0, os.path.dirname(__file__))

from fake_plugin_file_generator import FakePluginFileGenerator  # noqa: E402
from fake_wp_cli import FakeWpCli  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "scaffold-cmd" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def fake_generator():
    return FakePluginFileGenerator()


@pytest.fixture
def fake_wp_cli():
    return FakeWpCli()
