"""See full diffs in pytest. Shared pixel buffers for the quantizer tests.

:created: 2026-10-12
"""

from typing import Any, Callable

import numpy as np
import pytest
from numpy import typing as npt


def pytest_assertrepr_compare(
    config: Any, op: str, left: str, right: str
) -> list[str] | None:
    """See full error diffs"""
    del config
    if op in ("==", "!="):
        return [f"{left} {op} {right}"]
    return None


def _pixels_from_rgbs(*rgbs: tuple[int, int, int]) -> bytes:
    """Create an rgba buffer with one opaque pixel per rgb tuple."""
    return bytes(channel for rgb in rgbs for channel in (*rgb, 255))


@pytest.fixture
def make_pixels() -> Callable[..., bytes]:
    """Return a function to create an rgba buffer from rgb tuples."""
    return _pixels_from_rgbs


@pytest.fixture
def rgbw_pixels() -> bytes:
    """A 2x2 image of pure red, green, blue, and white."""
    return _pixels_from_rgbs((255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 255))


@pytest.fixture(params=[0, 1, 2])
def random_pixels(request: pytest.FixtureRequest) -> npt.NDArray[np.uint8]:
    """Return a reproducible buffer of 600 random rgba pixels."""
    rng = np.random.default_rng(request.param)
    return rng.integers(0, 256, size=600 * 4, dtype=np.uint8)
