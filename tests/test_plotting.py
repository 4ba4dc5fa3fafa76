"""
Tests for the matplotlib plotting sink.
"""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from springconstant.model.sweeps import TemperatureSweep, multi_temperature_time_sweep
from springconstant.plotting import plot_temperature_sweep, plot_time_sweeps, save_figure


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_temperature_figure(steel):
    sweep = TemperatureSweep(steel)
    fig = plot_temperature_sweep(sweep)
    ax = fig.axes[0]

    assert len(ax.lines) == 1
    x, y = ax.lines[0].get_data()
    assert len(x) == 200
    assert np.asarray(y) == pytest.approx(sweep.arrays()[1])
    assert ax.get_xlabel() == "Temperature (°C)"
    assert ax.get_ylabel() == "Spring Constant (N/m)"
    assert "Nonlinear Response" in ax.get_title()


def test_time_figure_has_one_line_per_temperature(steel):
    sweeps = multi_temperature_time_sweep(steel)
    fig = plot_time_sweeps(sweeps)
    ax = fig.axes[0]

    assert len(ax.lines) == len(sweeps)
    assert [line.get_label() for line in ax.lines] == [s.label for s in sweeps.values()]
    assert ax.get_legend() is not None
    assert ax.get_xlabel() == "Time (seconds)"


def test_draws_on_given_axes(steel):
    fig, (left, right) = plt.subplots(1, 2)

    returned = plot_temperature_sweep(TemperatureSweep(steel, 0.0, 10.0, 3), ax=right)

    assert returned is fig
    assert len(right.lines) == 1
    assert len(left.lines) == 0


def test_no_legend_without_sweeps():
    fig = plot_time_sweeps({})
    assert fig.axes[0].get_legend() is None


def test_save_figure_creates_folder(steel, tmp_path):
    fig = plot_temperature_sweep(TemperatureSweep(steel, 0.0, 10.0, 3))
    target = tmp_path / "figures" / "k_vs_T.png"

    assert save_figure(fig, str(target)) == str(target)
    assert target.exists()
    assert target.stat().st_size > 0
