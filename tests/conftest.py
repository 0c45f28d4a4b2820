"""
Conftest: shared fixtures for all Holoshift test modules.
"""

import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _make_test_frame(width=64, height=48, alpha=255):
    """Generate a synthetic RGBA test frame (gradient, not blank)."""
    frame = np.zeros((height, width, 4), dtype=np.uint8)
    frame[:, :, 0] = np.linspace(0, 255, width, dtype=np.uint8)  # R gradient
    frame[:, :, 1] = 128  # constant G
    frame[:, :, 2] = np.linspace(255, 0, width, dtype=np.uint8)  # B inverse
    frame[:, :, 3] = alpha
    return frame


@pytest.fixture
def gradient_frame():
    return _make_test_frame()


@pytest.fixture
def random_frame():
    """A 40x56 deterministic RGBA frame with varied alpha."""
    rng = np.random.RandomState(42)
    return rng.randint(0, 256, (40, 56, 4), dtype=np.uint8)


@pytest.fixture
def black_frame():
    """All-zero frame, alpha included."""
    return np.zeros((16, 16, 4), dtype=np.uint8)


@pytest.fixture
def square_frame():
    """Dark frame with a bright square in the middle: strong edges."""
    frame = np.zeros((20, 20, 4), dtype=np.uint8)
    frame[:, :, 3] = 255
    frame[6:14, 6:14, :3] = 220
    return frame
