"""
Configuration & Reference Constants
===================================
Central registry for the reference material constants, the sweep settings
used by the diagnostic plots and the default output location.

Exports:
    DEFAULT_* (float): Reference material constants (steel).
    TEMPERATURE_SWEEP_* : Bounds and sample count of the temperature sweep.
    TIME_SWEEP_* : Bounds and sample count of the time sweeps.
    SELECTED_TEMPERATURES (tuple[float, ...]): Temperatures of the time sweeps.
    OUTPUT_FOLDER_NAME (str): Folder for saved figures, under the working directory.
"""
import os


def default_output_path() -> str:
    """
    Default folder for saved figures, resolved against the current working directory.
    """
    return os.path.join(os.getcwd(), OUTPUT_FOLDER_NAME)


# Material constants (typical for steel)
DEFAULT_E0: float = 200e9       # Young's modulus at T0 [Pa]
DEFAULT_A0: float = 1e-4        # Cross-sectional area [m²] (10 mm x 10 mm)
DEFAULT_L0: float = 0.5         # Original length [m]
DEFAULT_T0: float = 20.0        # Reference temperature [°C]
DEFAULT_ALPHA: float = 12e-6    # Coefficient of thermal expansion [1/°C]
DEFAULT_BETA: float = 0.0005    # Linear temperature coefficient of E [1/°C]
DEFAULT_GAMMA: float = 1e-4     # Quadratic stiffening coefficient, T < 0°C only
DEFAULT_LAMBDA: float = 1e-3    # Degradation constant [1/s]

# Temperature sweep
TEMPERATURE_SWEEP_MIN: float = -80.0
TEMPERATURE_SWEEP_MAX: float = 150.0
TEMPERATURE_SWEEP_SAMPLES: int = 200

# Time sweeps
TIME_SWEEP_MIN: float = 0.0
TIME_SWEEP_MAX: float = 100.0
TIME_SWEEP_SAMPLES: int = 100
SELECTED_TEMPERATURES: tuple[float, ...] = (-80.0, -40.0, -10.0, 0.0, 20.0, 50.0, 100.0, 150.0)

OUTPUT_FOLDER_NAME: str = "output"
TEMPERATURE_FIGURE_NAME: str = "spring_constant_vs_temperature.png"
TIME_FIGURE_NAME: str = "spring_constant_vs_time.png"
