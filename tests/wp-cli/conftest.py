import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "scaffold-cmd"))


def pytest_collection_modifyitems(items):
    for item in items:
        if "wp-cli" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
