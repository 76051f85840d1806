"""
Cap notices for deduction claims above their statutory limits.

Unlike a business-rule validator this never rejects input: a claim above
its cap is legal and simply deducted at the cap. All notices are collected
in a single pass so the form can show every one at once.
"""
from __future__ import annotations

import logging

from taxcalc.engine.deductions import (
    COMBINED_80C_LIMIT,
    HOME_LOAN_INTEREST_LIMIT,
    SECTION_80CCD_LIMIT,
    SECTION_80D_SELF_LIMIT,
    SECTION_80G_LIMIT,
    SECTION_80TTA_LIMIT,
    parents_80d_limit,
)
from taxcalc.engine.schemas import CapNotice
from taxcalc.inputs.schemas import DeductionInputs

logger = logging.getLogger(__name__)


def collect_cap_notices(deductions: DeductionInputs) -> list[CapNotice]:
    """
    Return a CapNotice for every component claimed above its limit.

    Args:
        deductions: Raw, uncapped deduction claims.

    Returns:
        Notices in form order; empty when every claim is within its cap.
    """
    notices: list[CapNotice] = []

    def _check(field: str, claimed: float, limit: float, label: str) -> None:
        if claimed > limit:
            notices.append(CapNotice(
                field=field,
                claimed=claimed,
                limit=limit,
                message=(
                    f"{label} claim of ₹{claimed:,.0f} exceeds the limit of ₹{limit:,.0f}. "
                    f"Only ₹{limit:,.0f} will be considered for deduction."
                ),
            ))

    # ---- 1. 80C investments + home loan principal (one ceiling) -----------
    _check(
        "section_80c",
        deductions.section_80c + deductions.home_loan.principal,
        COMBINED_80C_LIMIT,
        "Section 80C (including home loan principal)",
    )

    # ---- 2. 80D self/family and parents ----------------------------------
    d80 = deductions.section_80d
    _check(
        "section_80d.self_and_family_premium",
        d80.self_and_family_premium,
        SECTION_80D_SELF_LIMIT,
        "Section 80D self/family premium",
    )
    _check(
        "section_80d.parents_premium",
        d80.parents_premium,
        parents_80d_limit(d80),
        "Section 80D "
        + ("senior citizen parents" if d80.parents_are_senior_citizens else "parents")
        + " premium",
    )

    # ---- 3. Independently capped sections ---------------------------------
    _check("section_80ccd", deductions.section_80ccd, SECTION_80CCD_LIMIT, "Section 80CCD (NPS)")
    _check("section_80tta", deductions.section_80tta, SECTION_80TTA_LIMIT, "Section 80TTA savings interest")
    _check("section_80g", deductions.section_80g, SECTION_80G_LIMIT, "Section 80G donations")
    _check(
        "home_loan.interest",
        deductions.home_loan.interest,
        HOME_LOAN_INTEREST_LIMIT,
        "Home loan interest",
    )

    if notices:
        # Count only, no claim amounts in logs
        logger.info("Deduction claims above cap: %d notice(s)", len(notices))
    return notices
