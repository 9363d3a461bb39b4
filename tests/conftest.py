"""Central test fixtures."""

from unittest.mock import MagicMock

import pytest

from mongoprops import MongoProperties


@pytest.fixture
def logger() -> MagicMock:
    """Create a mock logger capability."""
    return MagicMock(spec=["info", "warning"])


@pytest.fixture
def builder() -> MongoProperties.Builder:
    """Create a fresh property builder."""
    return MongoProperties.Builder()
