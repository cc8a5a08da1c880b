"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import adapters, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from adapters import gag_adapter, cycleon_adapter  # noqa: E402
from test_fixtures import FakeUpstream  # noqa: E402


@pytest.fixture
def gag_upstream():
    """Fake stock/weather aggregator wired into the GAG adapter."""
    fake = FakeUpstream()
    gag_adapter.connect("https://gag.test", transport=fake.transport())
    yield fake
    gag_adapter.close()


@pytest.fixture
def cycleon_upstream():
    """Fake statistics/prediction API wired into the Cycleon adapter."""
    fake = FakeUpstream()
    cycleon_adapter.connect("https://cycleon.test", transport=fake.transport())
    yield fake
    cycleon_adapter.close()
