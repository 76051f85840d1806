"""
taxcalc — Indian income tax engine for the new and old regimes (FY 2025-26).

Public API:
    compare_regimes(inputs)          → TaxResult (both regimes + recommendation)
    compute_new_regime_tax(gross)    → float
    compute_old_regime_tax(gross, deductions, salary) → float
    build_tax_inputs(form)           → TaxInputs from raw form-field strings
"""
from taxcalc.engine.tax_engine import (
    compare_regimes,
    compute_new_regime_tax,
    compute_old_regime_tax,
)
from taxcalc.inputs.parsing import build_tax_inputs
from taxcalc.inputs.schemas import (
    DeductionInputs,
    HomeLoanInputs,
    SalaryDetails,
    Section80DInputs,
    TaxInputs,
)

__all__ = [
    "compare_regimes",
    "compute_new_regime_tax",
    "compute_old_regime_tax",
    "build_tax_inputs",
    "DeductionInputs",
    "HomeLoanInputs",
    "SalaryDetails",
    "Section80DInputs",
    "TaxInputs",
]
