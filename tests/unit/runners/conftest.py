from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_completed() -> MagicMock:
    """Create a mock CompletedProcess with byte output."""
    completed = MagicMock()
    completed.returncode = 0
    completed.stdout = b"stdout output\n"
    completed.stderr = b""
    return completed
