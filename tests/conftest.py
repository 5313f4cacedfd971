"""
Shared fixtures for the Ideator tests.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from tests.helpers import make_payload


@pytest.fixture
def evaluation_payload():
    """Fixture providing a fresh, valid evaluation payload."""
    return make_payload()


@pytest.fixture
def mock_ai_service():
    """Fixture providing a mocked AI service with an async generate method."""
    mock_service = MagicMock()
    mock_service.generate = AsyncMock()
    return mock_service
