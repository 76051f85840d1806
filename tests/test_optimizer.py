"""Old regime headroom suggestion tests."""
from __future__ import annotations

from taxcalc.engine.optimizer import generate_old_suggestions
from taxcalc.engine.tax_engine import calculate_old_regime
from taxcalc.inputs.schemas import DeductionInputs, HomeLoanInputs, TaxInputs


def _suggest(inputs: TaxInputs) -> list[str]:
    return generate_old_suggestions(inputs.deductions, calculate_old_regime(inputs))


def test_no_suggestions_in_zero_rated_slab() -> None:
    # taxable = 250000 → 0% slab
    assert _suggest(TaxInputs(gross_income=300_000)) == []


def test_top_three_sorted_by_saving() -> None:
    # taxable = 1450000 → 20% marginal
    # 80C 150000→30000, 80CCD 50000→10000, 80D self 25000→5000, parents 25000→5000
    suggestions = _suggest(TaxInputs(gross_income=1_500_000))
    assert len(suggestions) == 3
    assert "80C" in suggestions[0] and "₹30,000" in suggestions[0]
    assert "80CCD" in suggestions[1] and "₹10,000" in suggestions[1]
    assert "self/family" in suggestions[2]


def test_small_savings_suppressed() -> None:
    # taxable = 500000 - 50000 - 145000 = 305000 → 5% marginal
    # 80C headroom 5000 → ₹250 saving, below ₹1,000
    suggestions = _suggest(TaxInputs(
        gross_income=500_000, deductions=DeductionInputs(section_80c=145_000),
    ))
    assert suggestions
    assert not any("80C instruments" in s for s in suggestions)


def test_home_loan_interest_hint_only_with_loan() -> None:
    without_loan = _suggest(TaxInputs(gross_income=5_000_000, deductions=DeductionInputs(
        section_80c=150_000, section_80ccd=50_000,
    )))
    with_loan = _suggest(TaxInputs(gross_income=5_000_000, deductions=DeductionInputs(
        section_80c=150_000, section_80ccd=50_000,
        home_loan=HomeLoanInputs(interest=50_000),
    )))
    assert not any("Home loan interest" in s for s in without_loan)
    # interest headroom 150000 × 30% = 45000, the largest saving
    assert with_loan[0].startswith("Home loan interest of up to ₹150,000")
