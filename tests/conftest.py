"""
Test configuration for the taxcalc test suite.

Puts the project root on sys.path so `import taxcalc` resolves whether or
not the package is installed, and pytest can run from the project root or
from tests/.
"""
import sys
from pathlib import Path

import pytest

_project_root = Path(__file__).parent.parent

if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest.fixture
def no_deduction_inputs():
    """₹12L gross income, no salary details, no deductions."""
    from taxcalc.inputs.schemas import TaxInputs
    return TaxInputs(gross_income=1_200_000)
