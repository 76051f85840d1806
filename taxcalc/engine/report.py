"""
report.py — presentation-facing values derived from a TaxResult.

The chart, summary panel and PDF export render these; nothing here feeds
back into the tax computation.
"""
from __future__ import annotations

from taxcalc.engine.schemas import RegimeResult, RegimeSlabTable, TaxResult, TaxSlab
from taxcalc.engine.slabs import NEW_REGIME_SLABS, OLD_REGIME_SLABS

_LAKH = 100_000


def _lakh(amount: float, fixed: bool = False) -> str:
    value = amount / _LAKH
    return f"₹{value:.1f}L" if fixed else f"₹{value:g}L"


def slab_label(slab: TaxSlab) -> str:
    """Human label for a slab: "Up to ₹4L", "₹4.0L-₹8.0L", "Above ₹24L"."""
    if slab.is_unbounded:
        if slab.lower_bound == 0:
            return "All income"
        return f"Above {_lakh(slab.lower_bound - 1)}"
    if slab.lower_bound == 0:
        return f"Up to {_lakh(slab.upper_bound)}"
    return f"{_lakh(slab.lower_bound, fixed=True)}-{_lakh(slab.upper_bound, fixed=True)}"


def slab_rate_rows(table: RegimeSlabTable) -> list[dict]:
    """[{name, rate}] per slab — the data behind the slab-rate chart."""
    return [{"name": slab_label(slab), "rate": slab.rate} for slab in table.slabs]


def tax_distribution(result: TaxResult) -> list[dict]:
    """[{name, value}] for the regime comparison chart."""
    return [
        {"name": "New Regime Tax", "value": result.new_regime.tax_payable},
        {"name": "Old Regime Tax", "value": result.old_regime.tax_payable},
    ]


def _slab_lines(regime: RegimeResult, table: RegimeSlabTable) -> list[tuple[str, float]]:
    by_lower = {slab.lower_bound: slab for slab in table.slabs}
    rows: list[tuple[str, float]] = []
    for line in regime.slab_breakdown:
        if line.taxable_amount <= 0:
            continue
        label = slab_label(by_lower[line.lower_bound])
        rows.append((f"{label}: ₹{line.taxable_amount:,.0f} × {line.rate:g}%", line.tax))
    return rows


def report_lines(result: TaxResult) -> dict[str, list[tuple[str, float]]]:
    """
    Ordered (label, amount) rows per regime for the exported report.

    Old regime rows list every capped deduction component, so the printed
    total always equals old_regime.total_deductions.
    """
    new, old = result.new_regime, result.old_regime
    new_rows: list[tuple[str, float]] = [
        ("Annual Income", new.gross_income),
        ("Standard Deduction", new.deduction_breakdown.standard_deduction),
        ("Taxable Income", new.taxable_income),
        *_slab_lines(new, NEW_REGIME_SLABS),
        ("Total New Regime Tax", new.tax_payable),
    ]

    bd = old.deduction_breakdown
    old_rows: list[tuple[str, float]] = [
        ("Annual Income", old.gross_income),
        ("Standard Deduction", bd.standard_deduction),
        ("Section 80C Deduction (incl. home loan principal)", bd.section_80c),
        ("Section 80D Deduction", bd.section_80d),
        ("Section 80CCD Deduction", bd.section_80ccd),
        ("Section 80TTA Deduction", bd.section_80tta),
        ("Section 80G Deduction", bd.section_80g),
        ("HRA Exemption", bd.hra_exemption),
        ("Home Loan Interest", bd.home_loan_interest),
        ("Additional NPS", bd.nps_additional),
        ("Education Loan Interest", bd.education_loan_interest),
        ("Total Deductions", old.total_deductions),
        ("Taxable Income", old.taxable_income),
        *_slab_lines(old, OLD_REGIME_SLABS),
        ("Total Old Regime Tax", old.tax_payable),
    ]
    return {"new": new_rows, "old": old_rows}
