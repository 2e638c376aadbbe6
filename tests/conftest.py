"""
Shared fixtures for the HillForge test suite.
"""

import pytest

from shared.config import ForgeConfig
from shared.logger import ForgeLogger
from hill.core.engine import HillEngine
from hill.core.matrix import ModMatrix


@pytest.fixture
def quiet_logger():
    """Logger with no handlers attached, for components that take one."""
    return ForgeLogger("test", console_output=False)


@pytest.fixture
def config():
    return ForgeConfig()


@pytest.fixture
def engine(config, quiet_logger):
    return HillEngine(config, logger=quiet_logger)


@pytest.fixture
def key_2x2():
    """The textbook 2x2 key [[3, 3], [2, 5]] mod 26 (det 9)."""
    return ModMatrix.from_rows([[3, 3], [2, 5]], 26)


@pytest.fixture
def key_3x3():
    """The classic 3x3 key for "ACT" -> "POH" mod 26 (det 25)."""
    return ModMatrix.from_rows([[6, 24, 1], [13, 16, 10], [20, 17, 15]], 26)
