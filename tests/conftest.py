"""
Pytest configuration and fixtures for snake-core tests.

This module sets up pygame mocking so the host script can be imported
without a display, and provides deterministic random sources.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))

from snake_core.core.random_source import RandomSource


class FixedRandomSource(RandomSource):
    """Random source that always answers the same value and logs calls."""

    def __init__(self, value: int = 0):
        self.value = value
        self.calls = []

    def random_range(self, low: int, high_exclusive: int) -> int:
        self.calls.append((low, high_exclusive))
        return self.value


def create_mock_pygame():
    """Create a mock of the pygame module with the constants the host uses."""
    mock_pygame = MagicMock()

    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Events
    mock_pygame.event.get.return_value = []
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768

    # Keys
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100
    mock_pygame.K_r = 114
    mock_pygame.K_SPACE = 32

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.get_ticks.return_value = 0

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before the host script is imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


@pytest.fixture
def fixed_random():
    """Random source that always picks the first free cell."""
    return FixedRandomSource(0)


@pytest.fixture
def make_game(fixed_random):
    """Factory for games that place food deterministically."""
    from snake_core.game.snake_game import GameState

    def _make(width, height):
        return GameState(width, height, random_source=fixed_random)

    return _make


@pytest.fixture
def temp_config_file(tmp_path):
    """Write a small config.yaml and return its path."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "game:\n"
        "  grid_width: 12\n"
        "  grid_height: 8\n"
        "  seed: 42\n"
        "  unknown_key: ignored\n"
        "host:\n"
        "  tick_interval_ms: 150\n"
    )
    return path


@pytest.fixture
def random_stub_class():
    """The stub class itself, for tests that need several instances."""
    return FixedRandomSource
