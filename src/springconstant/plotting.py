"""
Plotting
========
Diagnostic figures of the spring model (matplotlib). Consumes the (x, k)
arrays of the sweeps; no model logic lives here.
"""
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Mapping, Optional

import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure
    from springconstant.model.sweeps import TemperatureSweep, TimeSweep

logger = logging.getLogger(__name__)


def _new_axes(ax: Optional[Axes]) -> Axes:
    if ax is not None:
        return ax
    plt.rcParams["figure.constrained_layout.use"] = True
    _, ax = plt.subplots(figsize=(8, 5))
    return ax


def _style_grid(ax: Axes) -> None:
    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.minorticks_on()
    ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)


def plot_temperature_sweep(sweep: TemperatureSweep, ax: Optional[Axes] = None) -> Figure:
    """
    Plot the spring constant against temperature.
    """
    ax = _new_axes(ax)
    temperatures, k = sweep.arrays()

    ax.plot(temperatures, k, color=sweep.material.color, lw=2)
    _style_grid(ax)

    ax.set_title("Spring Constant vs Temperature (Nonlinear Response for T < 0°C)")
    ax.set_xlabel("Temperature (°C)")
    ax.set_ylabel("Spring Constant (N/m)")
    return ax.figure


def plot_time_sweeps(sweeps: Mapping[float, TimeSweep], ax: Optional[Axes] = None) -> Figure:
    """
    Plot the spring constant against elapsed time, one line per temperature.
    """
    ax = _new_axes(ax)

    for sweep in sweeps.values():
        times, k = sweep.arrays()
        ax.plot(times, k, lw=2, label=sweep.label)

    _style_grid(ax)
    ax.set_title("Spring Constant vs Time for Selected Temperatures")
    ax.set_xlabel("Time (seconds)")
    ax.set_ylabel("Spring Constant (N/m)")
    if sweeps:
        ax.legend()
    return ax.figure


def save_figure(fig: Figure, filepath: str, dpi: int = 150) -> str:
    """Save a figure, creating the target folder if needed."""
    folder = os.path.dirname(os.path.abspath(filepath))
    os.makedirs(folder, exist_ok=True)
    fig.savefig(filepath, dpi=dpi)
    logger.info(f"Saved figure to {filepath}")
    return filepath
