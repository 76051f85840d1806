"""
taxcalc Tax Engine — FY 2025-26 (AY 2026-27)
Pure Python, deterministic. Same input → same output.

New regime: flat ₹75,000 standard deduction, then slab tax.
Old regime: ₹50,000 standard deduction + every capped deduction, then slab tax.

Both regimes are recomputed from scratch on every call — no memoised state.
"""
from __future__ import annotations

import logging

from taxcalc.config import settings
from taxcalc.engine.deductions import (
    OLD_REGIME_STANDARD_DEDUCTION,
    compute_deduction_breakdown,
    compute_old_regime_taxable_income,
)
from taxcalc.engine.optimizer import generate_old_suggestions
from taxcalc.engine.schemas import (
    DeductionBreakdown,
    Regime,
    RegimeResult,
    SlabContribution,
    TaxResult,
)
from taxcalc.engine.slabs import (
    NEW_REGIME_SLABS,
    OLD_REGIME_SLABS,
    compute_slab_tax,
    slab_breakdown,
)
from taxcalc.inputs.schemas import DeductionInputs, SalaryDetails, TaxInputs
from taxcalc.inputs.validator import collect_cap_notices

logger = logging.getLogger(__name__)

NEW_REGIME_STANDARD_DEDUCTION = 75_000


def _round(amount: float) -> float:
    return round(amount, settings.round_places)


def _rounded_lines(lines: list[SlabContribution]) -> list[SlabContribution]:
    return [
        line.model_copy(update={
            "rate_tax": _round(line.rate_tax),
            "surcharge": _round(line.surcharge),
            "tax": _round(line.tax),
        })
        for line in lines
    ]


# ===========================================================================
# TOTALS
# ===========================================================================

def compute_new_regime_tax(gross_income: float) -> float:
    """Slab tax on max(0, gross - ₹75,000) using the new regime table."""
    taxable_income = max(0.0, gross_income - NEW_REGIME_STANDARD_DEDUCTION)
    return compute_slab_tax(taxable_income, NEW_REGIME_SLABS)


def compute_old_regime_tax(
    gross_income: float,
    deductions: DeductionInputs,
    salary: SalaryDetails,
) -> float:
    """Slab tax on the aggregated old regime taxable income."""
    taxable_income = compute_old_regime_taxable_income(
        gross_income, deductions, salary, OLD_REGIME_STANDARD_DEDUCTION,
    )
    return compute_slab_tax(taxable_income, OLD_REGIME_SLABS)


def recommend_regime(new_tax: float, old_tax: float) -> Regime:
    """New regime only when strictly cheaper. Ties → "old"."""
    return "new" if new_tax < old_tax else "old"


# ===========================================================================
# FULL RESULTS (with breakdowns)
# ===========================================================================

def calculate_new_regime(inputs: TaxInputs) -> RegimeResult:
    """
    New regime computation. Only the standard deduction applies; HRA, 80C,
    80D, 80CCD, 80TTA, 80G, home loan and NPS claims are ignored.
    """
    taxable_income = max(0.0, inputs.gross_income - NEW_REGIME_STANDARD_DEDUCTION)
    lines = slab_breakdown(taxable_income, NEW_REGIME_SLABS)
    return RegimeResult(
        regime="new",
        gross_income=inputs.gross_income,
        total_deductions=float(NEW_REGIME_STANDARD_DEDUCTION),
        taxable_income=_round(taxable_income),
        tax_payable=_round(compute_new_regime_tax(inputs.gross_income)),
        deduction_breakdown=DeductionBreakdown(
            standard_deduction=NEW_REGIME_STANDARD_DEDUCTION,
        ),
        slab_breakdown=_rounded_lines(lines),
    )


def calculate_old_regime(inputs: TaxInputs) -> RegimeResult:
    """Old regime computation with the full capped deduction breakdown."""
    breakdown = compute_deduction_breakdown(
        inputs.deductions, inputs.salary, OLD_REGIME_STANDARD_DEDUCTION,
    )
    taxable_income = max(0.0, inputs.gross_income - breakdown.total)
    lines = slab_breakdown(taxable_income, OLD_REGIME_SLABS)
    return RegimeResult(
        regime="old",
        gross_income=inputs.gross_income,
        total_deductions=_round(breakdown.total),
        taxable_income=_round(taxable_income),
        tax_payable=_round(compute_slab_tax(taxable_income, OLD_REGIME_SLABS)),
        deduction_breakdown=breakdown,
        slab_breakdown=_rounded_lines(lines),
    )


# ===========================================================================
# COMPARE REGIMES — public API
# ===========================================================================

def compare_regimes(inputs: TaxInputs) -> TaxResult:
    """
    Compute both regimes and recommend the cheaper one.

    The new regime must be strictly cheaper to be recommended; equal taxes
    recommend the old regime. Also attaches cap notices for over-limit
    claims and old regime headroom suggestions.
    """
    new = calculate_new_regime(inputs)
    old = calculate_old_regime(inputs)

    # Unrounded totals decide; rounding applies to the reported figures only
    new_tax = compute_new_regime_tax(inputs.gross_income)
    old_tax = compute_old_regime_tax(inputs.gross_income, inputs.deductions, inputs.salary)
    recommended = recommend_regime(new_tax, old_tax)
    savings = _round(abs(old_tax - new_tax))

    if new_tax == old_tax:
        rationale = (
            f"Both regimes result in the same tax (₹{old.tax_payable:,.0f}). "
            "Old Regime shown as recommended when taxes are equal."
        )
    elif recommended == "old":
        rationale = (
            f"Old Regime saves ₹{savings:,.0f} over the New Regime. "
            f"Old Regime tax: ₹{old.tax_payable:,.0f} vs New Regime tax: ₹{new.tax_payable:,.0f}. "
            f"Total Old Regime deductions: ₹{old.total_deductions:,.0f}."
        )
    else:
        rationale = (
            f"New Regime saves ₹{savings:,.0f} over the Old Regime. "
            f"New Regime tax: ₹{new.tax_payable:,.0f} vs Old Regime tax: ₹{old.tax_payable:,.0f}. "
            f"Your Old Regime deductions (₹{old.total_deductions:,.0f}) "
            "do not overcome the lower New Regime slab rates."
        )

    logger.debug("Regimes compared: recommended=%s", recommended)

    return TaxResult(
        financial_year=settings.financial_year,
        new_regime=new,
        old_regime=old,
        recommended_regime=recommended,
        savings_amount=savings,
        rationale=rationale,
        cap_notices=collect_cap_notices(inputs.deductions),
        old_regime_suggestions=generate_old_suggestions(inputs.deductions, old),
    )
