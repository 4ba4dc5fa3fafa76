"""
Sweeps
======
Finite, restartable sequences of (x, k) pairs over evenly spaced samples.

Iterating a sweep evaluates the spring model lazily, one sample at a time;
`arrays()` evaluates all samples at once through the batched kernels and is
what the plotting sink consumes.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator

import numpy as np

from springconstant import config
from springconstant.utils import evenly_spaced

if TYPE_CHECKING:
    import numpy.typing as npt
    from springconstant.model.spring import SpringMaterial

logger = logging.getLogger(__name__)


class TemperatureSweep:
    """
    Spring constant over evenly spaced temperatures at t = 0.
    """
    def __init__(
        self,
        material: SpringMaterial,
        temperature_min: float = config.TEMPERATURE_SWEEP_MIN,
        temperature_max: float = config.TEMPERATURE_SWEEP_MAX,
        samples: int = config.TEMPERATURE_SWEEP_SAMPLES,
    ):
        """
        Args:
            material: The spring to evaluate.
            temperature_min: First temperature in °C.
            temperature_max: Last temperature in °C, included.
            samples: Number of temperatures, at least two.
        """
        self.material = material
        self.temperatures = evenly_spaced(temperature_min, temperature_max, samples)
        material.validate(self.temperatures)

    def __len__(self) -> int:
        return self.temperatures.size

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for T in self.temperatures:
            yield float(T), self.material.spring_constant(float(T))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.temperatures[0]:g} to {self.temperatures[-1]:g} °C, "
            f"n={len(self)})"
        )

    def arrays(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Temperatures in °C and spring constants in N/m."""
        _, _, _, k = self.material.props_batch(self.temperatures)
        return self.temperatures.copy(), k


class TimeSweep:
    """
    Spring constant over evenly spaced elapsed times at a fixed temperature.
    """
    def __init__(
        self,
        material: SpringMaterial,
        temperature: float,
        time_min: float = config.TIME_SWEEP_MIN,
        time_max: float = config.TIME_SWEEP_MAX,
        samples: int = config.TIME_SWEEP_SAMPLES,
    ):
        """
        Args:
            material: The spring to evaluate.
            temperature: Fixed temperature in °C.
            time_min: First elapsed time in s, not negative.
            time_max: Last elapsed time in s, included.
            samples: Number of time samples, at least two.
        """
        self.material = material
        self.temperature = float(temperature)
        self.times = evenly_spaced(time_min, time_max, samples)
        material.validate(self.temperature, self.times)

    def __len__(self) -> int:
        return self.times.size

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for t in self.times:
            yield float(t), self.material.spring_constant_at_time(self.temperature, float(t))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(T={self.temperature:g} °C, "
            f"{self.times[0]:g} to {self.times[-1]:g} s, n={len(self)})"
        )

    @property
    def label(self) -> str:
        return f"T = {self.temperature:g}°C"

    def arrays(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Elapsed times in s and spring constants in N/m."""
        _, _, _, k = self.material.props_batch(self.temperature, self.times)
        return self.times.copy(), k


def temperature_sweep(
    material: SpringMaterial,
    temperature_min: float,
    temperature_max: float,
    samples: int,
) -> list[tuple[float, float]]:
    """(T, k) pairs for `samples` evenly spaced temperatures."""
    return list(TemperatureSweep(material, temperature_min, temperature_max, samples))


def time_sweep(
    material: SpringMaterial,
    temperature: float,
    time_min: float,
    time_max: float,
    samples: int,
) -> list[tuple[float, float]]:
    """(t, k) pairs for `samples` evenly spaced elapsed times at one temperature."""
    return list(TimeSweep(material, temperature, time_min, time_max, samples))


def multi_temperature_time_sweep(
    material: SpringMaterial,
    temperatures: Iterable[float] = config.SELECTED_TEMPERATURES,
    time_min: float = config.TIME_SWEEP_MIN,
    time_max: float = config.TIME_SWEEP_MAX,
    samples: int = config.TIME_SWEEP_SAMPLES,
) -> dict[float, TimeSweep]:
    """
    One independent time sweep per temperature.

    Returns:
        Mapping temperature -> TimeSweep, in the order the temperatures were given.
    """
    sweeps: dict[float, TimeSweep] = {}
    for T in temperatures:
        T = float(T)
        if T in sweeps:
            logger.warning(f"Duplicate temperature {T:g} °C in time sweep, evaluated once.")
            continue
        sweeps[T] = TimeSweep(material, T, time_min, time_max, samples)
    return sweeps
