"""
Old regime deduction aggregator — FY 2025-26.

Every component is capped independently, except 80C investments and home
loan principal which share one ceiling. Terms are additive, so the order of
application does not change the result.
"""
from __future__ import annotations

import logging

from taxcalc.engine.hra import hra_breakdown
from taxcalc.engine.schemas import DeductionBreakdown, Section80CBreakdown
from taxcalc.inputs.schemas import DeductionInputs, SalaryDetails, Section80DInputs

logger = logging.getLogger(__name__)

# ===========================================================================
# DEDUCTION CAP CONSTANTS
# ===========================================================================

OLD_REGIME_STANDARD_DEDUCTION = 50_000

COMBINED_80C_LIMIT               = 150_000   # 80C investments + home loan principal
SECTION_80D_SELF_LIMIT           = 25_000
SECTION_80D_PARENTS_LIMIT        = 25_000    # parents_are_senior_citizens == False
SECTION_80D_PARENTS_SENIOR_LIMIT = 50_000    # parents_are_senior_citizens == True
SECTION_80CCD_LIMIT              = 50_000
SECTION_80TTA_LIMIT              = 10_000
SECTION_80G_LIMIT                = 100_000
HOME_LOAN_INTEREST_LIMIT         = 200_000

HRA_MONTHS_PER_YEAR = 12


# ===========================================================================
# COMPONENT HELPERS (pure functions — no side effects)
# ===========================================================================

def combined_80c(deductions: DeductionInputs) -> Section80CBreakdown:
    """
    80C investments and home loan principal are capped as one total.
    Which component the excess comes from is not selectable.
    """
    total = deductions.section_80c + deductions.home_loan.principal
    return Section80CBreakdown(
        investments=deductions.section_80c,
        home_loan_principal=deductions.home_loan.principal,
        total_claimed=total,
        limit=COMBINED_80C_LIMIT,
        deductible=min(total, COMBINED_80C_LIMIT),
    )


def parents_80d_limit(section_80d: Section80DInputs) -> float:
    if section_80d.parents_are_senior_citizens:
        return SECTION_80D_PARENTS_SENIOR_LIMIT
    return SECTION_80D_PARENTS_LIMIT


def section_80d(section_80d: Section80DInputs) -> float:
    """
    80D: self/family premium capped at the self limit, parents' premium at
    the parents' tier limit, and the sum held under the combined tier limit.
    """
    parents_limit = parents_80d_limit(section_80d)
    self_ded    = min(section_80d.self_and_family_premium, SECTION_80D_SELF_LIMIT)
    parents_ded = min(section_80d.parents_premium, parents_limit)
    return min(SECTION_80D_SELF_LIMIT + parents_limit, self_ded + parents_ded)


# ===========================================================================
# AGGREGATOR
# ===========================================================================

def compute_deduction_breakdown(
    deductions: DeductionInputs,
    salary: SalaryDetails,
    standard_deduction: float = OLD_REGIME_STANDARD_DEDUCTION,
) -> DeductionBreakdown:
    """Every old regime deduction after caps, with the HRA and 80C detail."""
    hra = hra_breakdown(salary, months=HRA_MONTHS_PER_YEAR)
    detail_80c = combined_80c(deductions)
    return DeductionBreakdown(
        standard_deduction=standard_deduction,
        hra_exemption=hra.exemption,
        section_80c=detail_80c.deductible,
        section_80d=section_80d(deductions.section_80d),
        section_80ccd=min(deductions.section_80ccd, SECTION_80CCD_LIMIT),
        section_80tta=min(deductions.section_80tta, SECTION_80TTA_LIMIT),
        section_80g=min(deductions.section_80g, SECTION_80G_LIMIT),
        home_loan_interest=min(deductions.home_loan.interest, HOME_LOAN_INTEREST_LIMIT),
        nps_additional=deductions.nps_additional,
        education_loan_interest=deductions.education_loan_interest,
        hra=hra,
        section_80c_detail=detail_80c,
    )


def compute_old_regime_taxable_income(
    gross_income: float,
    deductions: DeductionInputs,
    salary: SalaryDetails,
    standard_deduction: float = OLD_REGIME_STANDARD_DEDUCTION,
) -> float:
    """gross - standard deduction - all capped/uncapped components, never negative."""
    breakdown = compute_deduction_breakdown(deductions, salary, standard_deduction)
    if breakdown.total >= gross_income > 0:
        logger.debug("Old regime deductions cover gross income — taxable income clamped to 0")
    return max(0.0, gross_income - breakdown.total)
