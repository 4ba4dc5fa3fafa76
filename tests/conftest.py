"""
Pytest configuration for the springconstant test suite.

Forces the non-interactive matplotlib backend so plotting tests run headless.
"""

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# Allow running the suite from a plain checkout without installing the package
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import pytest

from springconstant.model.parameters import MaterialParameters
from springconstant.model.spring import SpringMaterial


@pytest.fixture
def parameters() -> MaterialParameters:
    return MaterialParameters()


@pytest.fixture
def steel(parameters: MaterialParameters) -> SpringMaterial:
    return SpringMaterial(parameters)
