# kernels.py
from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt
import numba as nb

# ---- JIT'd spring model kernels (scalar + batched) ----
# No fastmath: operations keep the order of the NumPy path, results agree to rounding.

@nb.njit(cache=True)
def youngs_modulus_kernel(T_C: float, E0: float, T0: float, beta: float, gamma: float) -> float:
    """Young's modulus E(T) in Pa, quadratic stiffening only for T < 0°C."""
    E = E0 * (1.0 - beta * (T_C - T0))
    if T_C >= 0.0:
        return E
    return E * (1.0 + gamma * (T_C * T_C))

@nb.njit(cache=True)
def length_kernel(T_C: float, L0: float, T0: float, alpha: float) -> float:
    """Length L(T) in m."""
    return L0 * (1.0 + alpha * (T_C - T0))

@nb.njit(cache=True)
def area_kernel(T_C: float, A0: float, T0: float, alpha: float) -> float:
    """Cross-sectional area A(T) in m², first-order biaxial expansion."""
    return A0 * (1.0 + 2.0 * alpha * (T_C - T0))

@nb.njit(cache=True)
def spring_constant_kernel(E: float, A: float, L: float, lambda_: float, t: float) -> float:
    """Spring constant k = E(t)·A/L in N/m with exponential degradation of E."""
    return E * math.exp(-lambda_ * t) * A / L

@nb.njit(cache=True)
def spring_props_batch(
    T_C: npt.NDArray[np.float64],
    t: npt.NDArray[np.float64],
    E0: float, A0: float, L0: float, T0: float,
    alpha: float, beta: float, gamma: float, lambda_: float
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Batched spring model.

    Args:
        T_C: Temperatures in °C, shape (n,).
        t:   Elapsed times in s, shape (n,).

    Returns:
        E: Young's modulus (Pa), shape (n,).
        L: Length (m), shape (n,).
        A: Area (m²), shape (n,).
        k: Spring constant (N/m), shape (n,).
    """
    n = T_C.size
    E = np.empty(n, np.float64)
    L = np.empty(n, np.float64)
    A = np.empty(n, np.float64)
    k = np.empty(n, np.float64)
    for i in range(n):
        Ei = youngs_modulus_kernel(T_C[i], E0, T0, beta, gamma)
        Li = length_kernel(T_C[i], L0, T0, alpha)
        Ai = area_kernel(T_C[i], A0, T0, alpha)
        E[i] = Ei
        L[i] = Li
        A[i] = Ai
        k[i] = spring_constant_kernel(Ei, Ai, Li, lambda_, t[i])
    return E, L, A, k
