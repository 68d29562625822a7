"""Pytest configuration and shared fixtures."""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Create a seeded NumPy generator for testing."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_board():
    """Create a sample board state for testing."""
    from bgengine.core.board import initial_board
    return initial_board()


@pytest.fixture
def engine(rng):
    """Create a started engine with seeded dice."""
    from bgengine.core.engine import GameEngine
    eng = GameEngine(rng=rng)
    eng.start_game()
    return eng
