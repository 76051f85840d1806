"""
schemas.py — input data contracts (pydantic v2).

Defines:
  - SalaryDetails     (monthly salary figures — HRA exemption only)
  - Section80DInputs  (health insurance premiums + parents' senior flag)
  - HomeLoanInputs    (principal shares the 80C ceiling; interest has its own cap)
  - DeductionInputs   (every old-regime deduction component, raw/uncapped)
  - TaxInputs         (one calculation snapshot: gross income + the two above)

All models are frozen: a snapshot is never mutated, a changed form field
produces a new TaxInputs and a full recomputation.

All monetary fields are in INR and must be non-negative.
gross_income and every DeductionInputs field are ANNUAL.
SalaryDetails fields are MONTHLY — the aggregator annualises the HRA exemption.
"""
from pydantic import BaseModel, ConfigDict, Field


class SalaryDetails(BaseModel):
    """Monthly salary components used by the HRA least-of-three rule."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    basic_monthly: float = Field(default=0, ge=0, description="Monthly basic salary.")
    hra_received_monthly: float = Field(
        default=0, ge=0,
        description="Monthly HRA component received from the employer.",
    )
    rent_paid_monthly: float = Field(default=0, ge=0, description="Monthly rent actually paid.")
    is_metro_city: bool = Field(
        default=False,
        description="Metro city → 50% of basic for HRA rule 2, otherwise 40%.",
    )


class Section80DInputs(BaseModel):
    """Section 80D — health insurance premiums paid in the year."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    self_and_family_premium: float = Field(default=0, ge=0)
    parents_premium: float = Field(default=0, ge=0)
    parents_are_senior_citizens: bool = Field(
        default=False,
        description="True raises the parents' premium limit from ₹25,000 to ₹50,000.",
    )


class HomeLoanInputs(BaseModel):
    """Home loan repayments for a self-occupied property."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float = Field(
        default=0, ge=0,
        description="Principal repaid — deducted within the combined ₹1,50,000 80C limit.",
    )
    interest: float = Field(
        default=0, ge=0,
        description="Interest paid — capped separately at ₹2,00,000.",
    )


class DeductionInputs(BaseModel):
    """
    Raw (uncapped) deduction claims for the old regime.

    Caps are applied by the deduction aggregator, never here: a claim above
    its limit is legal input and produces a cap notice, not an error.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    section_80c: float = Field(
        default=0, ge=0,
        description="80C investments (PPF, ELSS, LIC, EPF, tuition fees, ...) excluding home loan principal.",
    )
    section_80d: Section80DInputs = Field(default_factory=Section80DInputs)
    section_80ccd: float = Field(default=0, ge=0, description="NPS contribution under 80CCD.")
    section_80tta: float = Field(default=0, ge=0, description="Savings account interest.")
    section_80g: float = Field(default=0, ge=0, description="Eligible donations.")
    home_loan: HomeLoanInputs = Field(default_factory=HomeLoanInputs)
    nps_additional: float = Field(default=0, ge=0, description="Additional NPS — deducted in full.")
    education_loan_interest: float = Field(
        default=0, ge=0,
        description="Education loan interest — deducted in full.",
    )


class TaxInputs(BaseModel):
    """One input snapshot for a full dual-regime calculation."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    gross_income: float = Field(default=0, ge=0, description="Annual gross income in INR.")
    salary: SalaryDetails = Field(default_factory=SalaryDetails)
    deductions: DeductionInputs = Field(default_factory=DeductionInputs)


__all__ = [
    "SalaryDetails",
    "Section80DInputs",
    "HomeLoanInputs",
    "DeductionInputs",
    "TaxInputs",
]
