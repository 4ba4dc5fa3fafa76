"""
Material Parameters
===================
Immutable parameter set of the spring model plus its (de)serialization.
"""
from __future__ import annotations

import json
import logging
import math
import numbers
from dataclasses import dataclass, asdict, fields, replace
from enum import StrEnum
from typing import Any, Dict

from springconstant import config

logger = logging.getLogger(__name__)


class Parameter(StrEnum):
    E0 = "E0"
    A0 = "A0"
    L0 = "L0"
    T0 = "T0"
    ALPHA = "alpha"
    BETA = "beta"
    GAMMA = "gamma"
    LAMBDA = "lambda"


@dataclass(frozen=True)
class ParameterMetadata:
    label: str
    unit: str


PARAMETER_METADATA: Dict[Parameter, ParameterMetadata] = {
    Parameter.E0: ParameterMetadata(label="Young's modulus at T0", unit="Pa"),
    Parameter.A0: ParameterMetadata(label="Cross-sectional area", unit="m²"),
    Parameter.L0: ParameterMetadata(label="Original length", unit="m"),
    Parameter.T0: ParameterMetadata(label="Reference temperature", unit="°C"),
    Parameter.ALPHA: ParameterMetadata(label="Coefficient of thermal expansion", unit="1/°C"),
    Parameter.BETA: ParameterMetadata(label="Temperature coefficient of E", unit="1/°C"),
    Parameter.GAMMA: ParameterMetadata(label="Nonlinear stiffening coefficient (T < 0°C)", unit="-"),
    Parameter.LAMBDA: ParameterMetadata(label="Degradation constant", unit="1/s"),
}

# Serialized names differ from attribute names only for lambda (Python keyword)
_ATTRIBUTE_NAMES: Dict[Parameter, str] = {p: p.value for p in Parameter}
_ATTRIBUTE_NAMES[Parameter.LAMBDA] = "lambda_"


@dataclass(frozen=True)
class MaterialParameters:
    """
    Constants of the spring model.

    Attributes:
        E0: Young's modulus at the reference temperature in Pa.
        A0: Cross-sectional area at the reference temperature in m².
        L0: Length at the reference temperature in m.
        T0: Reference temperature in °C.
        alpha: Coefficient of thermal expansion in 1/°C.
        beta: Linear temperature coefficient of Young's modulus in 1/°C.
        gamma: Quadratic stiffening coefficient, only applied below 0°C.
        lambda_: Exponential degradation rate of Young's modulus in 1/s.
    """
    E0: float = config.DEFAULT_E0
    A0: float = config.DEFAULT_A0
    L0: float = config.DEFAULT_L0
    T0: float = config.DEFAULT_T0
    alpha: float = config.DEFAULT_ALPHA
    beta: float = config.DEFAULT_BETA
    gamma: float = config.DEFAULT_GAMMA
    lambda_: float = config.DEFAULT_LAMBDA

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"Parameter '{f.name}' must be a number, got {value!r}.")
            if not math.isfinite(value):
                raise ValueError(f"Parameter '{f.name}' must be finite, got {value}.")
            # Normalize ints so arithmetic and equality stay in float64
            object.__setattr__(self, f.name, float(value))

        for name in ("E0", "A0", "L0"):
            if getattr(self, name) <= 0:
                raise ValueError(f"Parameter '{name}' must be positive, got {getattr(self, name)}.")

        if self.gamma < 0:
            raise ValueError(f"Parameter 'gamma' must not be negative, got {self.gamma}.")

        if self.lambda_ < 0:
            raise ValueError(f"Parameter 'lambda' must not be negative, got {self.lambda_}.")

    def with_overrides(self, **overrides: float) -> MaterialParameters:
        """Return a validated copy with some constants replaced."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, float]:
        values = asdict(self)
        return {p.value: values[_ATTRIBUTE_NAMES[p]] for p in Parameter}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> MaterialParameters:
        """Build parameters from serialized names, missing ones keep their defaults."""
        unknown = set(data) - {p.value for p in Parameter}
        if unknown:
            raise ValueError(f"Unknown material parameters: {', '.join(sorted(unknown))}.")

        kwargs = {_ATTRIBUTE_NAMES[Parameter(key)]: value for key, value in data.items()}
        return MaterialParameters(**kwargs)

    @classmethod
    def from_json(cls, filepath: str) -> MaterialParameters:
        """
        Load parameters from a JSON object such as {"E0": 210e9, "lambda": 2e-3}.
        """
        try:
            with open(filepath, mode='r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Parameter import failed: {e}")
            raise IOError(f"Failed to read parameter file '{filepath}': {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Parameter file '{filepath}' must contain a JSON object.")

        params = cls.from_dict(data)
        logger.info(f"Loaded material parameters from {filepath}")
        return params

    def describe(self) -> list[str]:
        """Human readable lines 'label (key) = value unit'."""
        values = self.to_dict()
        return [
            f"{meta.label} ({p.value}) = {values[p.value]:g} {meta.unit}"
            for p, meta in PARAMETER_METADATA.items()
        ]
