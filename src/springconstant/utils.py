from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def evenly_spaced(start: float, stop: float, num: int) -> npt.NDArray[np.float64]:
    """
    Evenly spaced samples from start to stop, both ends included.

    Args:
        start: First sample.
        stop: Last sample, must not be smaller than start.
        num: Number of samples, at least two.

    Returns:
        Array of shape (num,).
    """
    if num < 2:
        raise ValueError(f"At least two samples are required, got {num}.")
    if not (np.isfinite(start) and np.isfinite(stop)):
        raise ValueError(f"Sweep bounds must be finite, got [{start}, {stop}].")
    if stop <= start:
        raise ValueError(f"Sweep bounds must be increasing, got [{start}, {stop}].")
    return np.linspace(start, stop, num, dtype=np.float64)
