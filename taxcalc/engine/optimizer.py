"""
Deduction headroom hints — FY 2025-26
Plain-English suggestions for unused old regime deduction room.
Pure functions. No I/O.
"""
from __future__ import annotations

from taxcalc.engine.deductions import (
    COMBINED_80C_LIMIT,
    HOME_LOAN_INTEREST_LIMIT,
    SECTION_80CCD_LIMIT,
    SECTION_80D_SELF_LIMIT,
    parents_80d_limit,
)
from taxcalc.engine.schemas import RegimeResult
from taxcalc.engine.slabs import OLD_REGIME_SLABS, marginal_rate
from taxcalc.inputs.schemas import DeductionInputs

_SUGGESTION_MIN_SAVING = 1_000   # Suppress suggestions where tax saving < ₹1,000
_MAX_SUGGESTIONS = 3


def generate_old_suggestions(
    deductions: DeductionInputs,
    old_result: RegimeResult,
) -> list[str]:
    """
    Suggestions for unused old regime headroom: combined 80C, 80D self,
    80D parents, 80CCD (NPS) and home loan interest.

    Saving is priced at the old regime marginal slab rate. Returns at most
    3 suggestions, sorted by rupee saving descending.
    """
    rate = marginal_rate(old_result.taxable_income, OLD_REGIME_SLABS)
    if rate == 0.0:
        return []   # zero-rated slab

    bd = old_result.deduction_breakdown
    d80 = deductions.section_80d
    candidates: list[tuple[float, str]] = []   # (saving, suggestion_text)

    def _consider(headroom: float, template: str) -> None:
        saving = headroom * rate
        if headroom > 0 and saving >= _SUGGESTION_MIN_SAVING:
            candidates.append((saving, template.format(
                headroom=f"₹{headroom:,.0f}", saving=f"₹{round(saving):,.0f}",
            )))

    _consider(
        COMBINED_80C_LIMIT - bd.section_80c,
        "Invest {headroom} more in 80C instruments (PPF, ELSS, LIC) or home loan principal "
        "to save {saving} in the Old Regime.",
    )
    _consider(
        SECTION_80D_SELF_LIMIT - min(d80.self_and_family_premium, SECTION_80D_SELF_LIMIT),
        "Pay {headroom} more in health insurance (self/family) under Section 80D "
        "to save {saving} in the Old Regime.",
    )
    parents_limit = parents_80d_limit(d80)
    _consider(
        parents_limit - min(d80.parents_premium, parents_limit),
        "Pay {headroom} more in parent health insurance under Section 80D "
        "to save {saving} in the Old Regime.",
    )
    _consider(
        SECTION_80CCD_LIMIT - bd.section_80ccd,
        "Contribute {headroom} more to NPS (Section 80CCD) to save {saving} in the Old Regime.",
    )
    # Only prompt for interest headroom when a home loan already exists
    if deductions.home_loan.interest > 0 or deductions.home_loan.principal > 0:
        _consider(
            HOME_LOAN_INTEREST_LIMIT - bd.home_loan_interest,
            "Home loan interest of up to {headroom} more can be claimed "
            "to save {saving} in the Old Regime.",
        )

    candidates.sort(key=lambda x: x[0], reverse=True)
    return [text for _, text in candidates[:_MAX_SUGGESTIONS]]
