"""
schemas.py — engine data contracts (pydantic v2).

Defines:
  - TaxSlab, RegimeSlabTable   (slab tables — frozen, validated on construction)
  - SlabContribution           (one slab's share of the tax — report line item)
  - HRABreakdown               (the three HRA rules and the chosen exemption)
  - Section80CBreakdown        (80C investments + home loan principal vs. limit)
  - DeductionBreakdown         (every capped old-regime component)
  - RegimeResult               (full computation for one regime)
  - CapNotice                  (claim above its statutory limit — informational)
  - TaxResult                  (dual-regime comparison — public engine output)

Deduction values in the breakdowns are the ACTUAL amounts applied (after
caps), not the raw claims.
"""
from __future__ import annotations

import math
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

Regime = Literal["new", "old"]


# ---------------------------------------------------------------------------
# Slab tables
# ---------------------------------------------------------------------------

class TaxSlab(BaseModel):
    """
    One progressive bracket with inclusive integer bounds.

    upper_bound=inf marks the final, unbounded slab. fixed_amount supports
    tables that encode the tax due below the slab as a lump sum;
    surcharge_percent compounds on the running total tax, not on income.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    lower_bound: float = Field(..., ge=0)
    upper_bound: float = float("inf")
    rate: float = Field(..., ge=0, le=100)
    fixed_amount: float = Field(default=0, ge=0)
    surcharge_percent: Optional[float] = Field(default=None, ge=0)

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.upper_bound)


class RegimeSlabTable(BaseModel):
    """Ordered, contiguous slab table for one regime."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    regime: Regime
    slabs: Tuple[TaxSlab, ...]

    @model_validator(mode="after")
    def validate_contiguous_ascending(self) -> "RegimeSlabTable":
        if not self.slabs:
            raise ValueError("slab table must contain at least one slab")
        previous: Optional[TaxSlab] = None
        for index, slab in enumerate(self.slabs):
            if slab.upper_bound < slab.lower_bound:
                raise ValueError(
                    f"slab {index}: upper_bound {slab.upper_bound} is below lower_bound {slab.lower_bound}"
                )
            if previous is not None:
                if slab.lower_bound <= previous.lower_bound:
                    raise ValueError(f"slab {index}: lower bounds must be strictly ascending")
                if previous.is_unbounded:
                    raise ValueError(f"slab {index - 1}: only the final slab may be unbounded")
                if slab.lower_bound != previous.upper_bound + 1:
                    raise ValueError(
                        f"slab {index}: must start at {previous.upper_bound + 1:,.0f} "
                        f"(previous upper_bound + 1), got {slab.lower_bound:,.0f}"
                    )
            previous = slab
        if not self.slabs[-1].is_unbounded:
            raise ValueError("final slab must be unbounded (upper_bound=inf)")
        return self


# ---------------------------------------------------------------------------
# Breakdowns
# ---------------------------------------------------------------------------

class SlabContribution(BaseModel):
    """One slab's share of the tax for a given taxable income."""
    model_config = ConfigDict(extra="forbid")

    lower_bound: float
    upper_bound: float
    rate: float
    taxable_amount: float        # income falling inside this slab
    rate_tax: float              # taxable_amount * rate / 100
    fixed_amount: float = 0
    surcharge: float = 0         # surcharge on the running total at this slab
    tax: float                   # fixed_amount + rate_tax + surcharge


class HRABreakdown(BaseModel):
    """
    HRA least-of-three rule, scaled to `months` (12 = annual).

      rule_1: HRA actually received
      rule_2: 50% (metro) / 40% (non-metro) of basic
      rule_3: rent paid - 10% of basic, floored at 0
    """
    model_config = ConfigDict(extra="forbid")

    months: int = 12
    rule_1_hra_received: float = 0
    rule_2_basic_share: float = 0
    rule_3_rent_over_tenth_basic: float = 0
    exemption: float = 0


class Section80CBreakdown(BaseModel):
    """80C investments and home loan principal share one ceiling."""
    model_config = ConfigDict(extra="forbid")

    investments: float = 0
    home_loan_principal: float = 0
    total_claimed: float = 0
    limit: float = 0
    deductible: float = 0

    @property
    def exceeds_limit(self) -> bool:
        return self.total_claimed > self.limit


class DeductionBreakdown(BaseModel):
    """
    Itemised deductions applied in one regime.

    New regime: only standard_deduction is non-zero.
    """
    model_config = ConfigDict(extra="forbid")

    standard_deduction: float = 0
    hra_exemption: float = 0              # annualised least-of-three
    section_80c: float = 0                # combined with home loan principal
    section_80d: float = 0
    section_80ccd: float = 0
    section_80tta: float = 0
    section_80g: float = 0
    home_loan_interest: float = 0
    nps_additional: float = 0             # uncapped
    education_loan_interest: float = 0    # uncapped

    hra: Optional[HRABreakdown] = None
    section_80c_detail: Optional[Section80CBreakdown] = None

    @property
    def chapter_deductions(self) -> float:
        """Everything except the standard deduction."""
        return (
            self.hra_exemption + self.section_80c + self.section_80d
            + self.section_80ccd + self.section_80tta + self.section_80g
            + self.home_loan_interest + self.nps_additional + self.education_loan_interest
        )

    @property
    def total(self) -> float:
        return max(0.0, self.standard_deduction + self.chapter_deductions)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class RegimeResult(BaseModel):
    """
    Complete computation for a single regime.

    Sequence:
      1. total_deductions = standard deduction (+ capped components for old)
      2. taxable_income   = max(0, gross_income - total_deductions)
      3. tax_payable      = progressive slab tax on taxable_income
    """
    model_config = ConfigDict(extra="forbid")

    regime: Regime
    gross_income: float
    total_deductions: float
    taxable_income: float
    tax_payable: float
    deduction_breakdown: DeductionBreakdown
    slab_breakdown: List[SlabContribution] = Field(default_factory=list)


class CapNotice(BaseModel):
    """A raw claim above its statutory limit. Only the limit is deducted."""
    model_config = ConfigDict(extra="forbid")

    field: str
    claimed: float
    limit: float
    message: str


class TaxResult(BaseModel):
    """
    Output of compare_regimes().

    recommended_regime is "new" only when the new regime tax is strictly
    lower; equal taxes recommend "old".
    """
    model_config = ConfigDict(extra="forbid")

    financial_year: str
    new_regime: RegimeResult
    old_regime: RegimeResult

    recommended_regime: Regime
    savings_amount: float                # abs(old_tax - new_tax)
    rationale: str

    cap_notices: List[CapNotice] = Field(default_factory=list)
    old_regime_suggestions: List[str] = Field(default_factory=list)


__all__ = [
    "Regime",
    "TaxSlab",
    "RegimeSlabTable",
    "SlabContribution",
    "HRABreakdown",
    "Section80CBreakdown",
    "DeductionBreakdown",
    "RegimeResult",
    "CapNotice",
    "TaxResult",
]
