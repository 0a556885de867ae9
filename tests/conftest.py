from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.utils.sleep import CancellationToken

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch CancellationToken.sleep to make tests run faster.

    The mock is created with autospec, so every call records the token
    as first argument and the sleep duration as second argument.
    """
    with patch.object(CancellationToken, "sleep", autospec=True, return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_hook() -> Mock:
    """Create a mock failure hook for testing hooks."""
    return Mock()
