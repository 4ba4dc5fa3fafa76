"""
Spring Model
============
Temperature and time dependent spring constant of a prismatic rod.

For T >= 0°C:
    E(T) = E0 * (1 - beta*(T - T0))
For T < 0°C (nonlinear stiffening):
    E(T) = E0 * (1 - beta*(T - T0)) * (1 + gamma*T^2)

    L(T) = L0 * (1 + alpha*(T - T0))
    A(T) = A0 * (1 + 2*alpha*(T - T0))
    k(T) = E(T) * A(T) / L(T)

Degradation in time:
    k(T, t) = E(T) * exp(-lambda*t) * A(T) / L(T)

E(T) is not continuous at T = 0°C: the stiffening factor applies to strictly
negative temperatures only. The model is valid while both the length and the
area factor stay positive, i.e. for T > T0 - 1/(2*alpha).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from springconstant.model.kernels import spring_props_batch
from springconstant.model.parameters import MaterialParameters

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class DomainError(ValueError):
    """Raised for inputs outside the physically valid domain of the model."""


@dataclass(frozen=True)
class SpringResult:
    """Spring constant at one sample point together with its intermediates."""
    temperature: float
    time: float
    youngs_modulus: float
    length: float
    area: float
    spring_constant: float


def _as_array(value: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.atleast_1d(np.asarray(value, dtype=np.float64))


def _restore(value: float | npt.ArrayLike, result: npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
    """Return a float for scalar input, the array otherwise."""
    if np.ndim(value) == 0:
        return float(result[0])
    return result


class SpringMaterial:
    """
    Spring made of a material described by MaterialParameters.

    All methods accept a temperature in °C either as a scalar or as an array
    and return the same kind.
    """
    def __init__(
        self,
        parameters: MaterialParameters | None = None,
        name: str = "Steel",
        color: str = "black"
    ):
        """
        Args:
            parameters: Model constants, reference steel values if omitted.
            name: The name of the material, used for plot titles.
            color: The color of the material, used for visualization.
        """
        self.parameters = parameters if parameters is not None else MaterialParameters()
        self.name = name
        self.color = color

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, parameters={self.parameters})"

    @property
    def minimum_temperature(self) -> float:
        """Lowest temperature in °C, exclusive, at which length and area stay positive."""
        alpha = self.parameters.alpha
        if alpha > 0:
            # The area factor 1 + 2*alpha*dT reaches zero before the length factor
            return self.parameters.T0 - 1.0 / (2.0 * alpha)
        return -np.inf

    @property
    def maximum_temperature(self) -> float:
        """Highest temperature in °C, exclusive, for a negative expansion coefficient."""
        alpha = self.parameters.alpha
        if alpha < 0:
            return self.parameters.T0 - 1.0 / (2.0 * alpha)
        return np.inf

    def _check_temperature(self, T: npt.NDArray[np.float64]) -> None:
        if not np.all(np.isfinite(T)):
            raise DomainError("Temperature must be finite.")

        p = self.parameters
        dT = T - p.T0
        if np.any(1.0 + p.alpha * dT <= 0.0) or np.any(1.0 + 2.0 * p.alpha * dT <= 0.0):
            raise DomainError(
                f"Temperature outside the valid domain ({self.minimum_temperature:g}, "
                f"{self.maximum_temperature:g}) °C: length or area would not be positive."
            )

    @staticmethod
    def _check_time(t: npt.NDArray[np.float64]) -> None:
        if not np.all(np.isfinite(t)):
            raise DomainError("Elapsed time must be finite.")
        if np.any(t < 0.0):
            raise DomainError(f"Elapsed time must not be negative, got {t.min():g} s.")

    def validate(self, temperature: float | npt.ArrayLike, time: float | npt.ArrayLike = 0.0) -> None:
        """Raise DomainError unless every (temperature, time) sample is inside the valid domain."""
        self._check_temperature(_as_array(temperature))
        self._check_time(_as_array(time))

    def _youngs_modulus(self, T: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        p = self.parameters
        E = p.E0 * (1.0 - p.beta * (T - p.T0))
        return np.where(T >= 0.0, E, E * (1.0 + p.gamma * T ** 2))

    def _length(self, T: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        p = self.parameters
        return p.L0 * (1.0 + p.alpha * (T - p.T0))

    def _area(self, T: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        p = self.parameters
        # Linearized (1 + alpha*dT)^2
        return p.A0 * (1.0 + 2.0 * p.alpha * (T - p.T0))

    def youngs_modulus(self, temperature: float | npt.ArrayLike) -> float | npt.NDArray[np.float64]:
        """Young's modulus E(T) in Pa.

        Args:
            temperature: Temperature in °C.

        Returns:
            Young's modulus in Pa.
        """
        T = _as_array(temperature)
        if not np.all(np.isfinite(T)):
            raise DomainError("Temperature must be finite.")
        return _restore(temperature, self._youngs_modulus(T))

    def length(self, temperature: float | npt.ArrayLike) -> float | npt.NDArray[np.float64]:
        """Length L(T) in m.

        Args:
            temperature: Temperature in °C.

        Returns:
            Length in m.
        """
        T = _as_array(temperature)
        self._check_temperature(T)
        return _restore(temperature, self._length(T))

    def area(self, temperature: float | npt.ArrayLike) -> float | npt.NDArray[np.float64]:
        """Cross-sectional area A(T) in m².

        Args:
            temperature: Temperature in °C.

        Returns:
            Area in m².
        """
        T = _as_array(temperature)
        self._check_temperature(T)
        return _restore(temperature, self._area(T))

    def spring_constant(self, temperature: float | npt.ArrayLike) -> float | npt.NDArray[np.float64]:
        """Spring constant k(T) = E·A/L in N/m without degradation.

        Args:
            temperature: Temperature in °C.

        Returns:
            Spring constant in N/m.
        """
        T = _as_array(temperature)
        self._check_temperature(T)
        k = self._youngs_modulus(T) * self._area(T) / self._length(T)
        return _restore(temperature, k)

    def spring_constant_at_time(
        self,
        temperature: float | npt.ArrayLike,
        time: float | npt.ArrayLike = 0.0
    ) -> float | npt.NDArray[np.float64]:
        """Spring constant k(T, t) in N/m with exponential degradation of E.

        Temperature and time are broadcast against each other.

        Args:
            temperature: Temperature in °C.
            time: Elapsed time in s, 0 means no degradation.

        Returns:
            Spring constant in N/m.
        """
        T, t = np.broadcast_arrays(_as_array(temperature), _as_array(time))
        self._check_temperature(T)
        self._check_time(t)

        E_time = self._youngs_modulus(T) * np.exp(-self.parameters.lambda_ * t)
        k = E_time * self._area(T) / self._length(T)

        if np.ndim(temperature) == 0 and np.ndim(time) == 0:
            return float(k[0])
        return k

    def evaluate(self, temperature: float, time: float = 0.0) -> SpringResult:
        """Evaluate the model at a single sample point, keeping the intermediates."""
        T = _as_array(temperature)
        t = _as_array(time)
        if T.size != 1 or t.size != 1:
            raise ValueError("evaluate() expects a single temperature and time.")
        self._check_temperature(T)
        self._check_time(t)

        E = float(self._youngs_modulus(T)[0])
        L = float(self._length(T)[0])
        A = float(self._area(T)[0])
        k = E * float(np.exp(-self.parameters.lambda_ * t[0])) * A / L
        return SpringResult(
            temperature=float(T[0]),
            time=float(t[0]),
            youngs_modulus=E,
            length=L,
            area=A,
            spring_constant=k,
        )

    def props_batch(
        self,
        temperatures: npt.ArrayLike,
        times: npt.ArrayLike = 0.0
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Vectorized spring model through the JIT kernels.

        Args:
            temperatures: Temperatures in °C, shape (n,).
            times: Elapsed times in s, broadcast to shape (n,).

        Returns:
            E: Young's modulus (Pa), shape (n,).
            L: Length (m), shape (n,).
            A: Area (m²), shape (n,).
            k: Spring constant (N/m), shape (n,).
        """
        T, t = np.broadcast_arrays(_as_array(temperatures), _as_array(times))
        T = np.ascontiguousarray(T.ravel())
        t = np.ascontiguousarray(t.ravel())
        self._check_temperature(T)
        self._check_time(t)

        p = self.parameters
        logger.debug(f"Evaluating {T.size} samples of {self.name}")
        return spring_props_batch(T, t, p.E0, p.A0, p.L0, p.T0, p.alpha, p.beta, p.gamma, p.lambda_)
