"""HRA least-of-three exemption tests."""
from __future__ import annotations

import pytest

from taxcalc.engine.hra import compute_hra_exemption, hra_breakdown
from taxcalc.inputs.schemas import SalaryDetails


def test_hra_exemption_rule3_binding_metro() -> None:
    """basic 50000, HRA 25000, rent 20000, metro → min(25000, 25000, 15000)."""
    salary = SalaryDetails(
        basic_monthly=50_000, hra_received_monthly=25_000,
        rent_paid_monthly=20_000, is_metro_city=True,
    )
    assert compute_hra_exemption(salary) == pytest.approx(15_000)


def test_hra_exemption_rule2_binding_non_metro() -> None:
    """Non-metro uses 40% of basic: min(30000, 20000, 35000) = 20000."""
    salary = SalaryDetails(
        basic_monthly=50_000, hra_received_monthly=30_000,
        rent_paid_monthly=40_000, is_metro_city=False,
    )
    assert compute_hra_exemption(salary) == pytest.approx(20_000)


def test_hra_exemption_rule1_binding() -> None:
    salary = SalaryDetails(
        basic_monthly=100_000, hra_received_monthly=10_000,
        rent_paid_monthly=50_000, is_metro_city=True,
    )
    assert compute_hra_exemption(salary) == pytest.approx(10_000)


def test_hra_exemption_rule3_never_negative() -> None:
    """Rent below 10% of basic gives rule 3 = 0, not negative."""
    salary = SalaryDetails(
        basic_monthly=50_000, hra_received_monthly=25_000,
        rent_paid_monthly=3_000, is_metro_city=True,
    )
    assert compute_hra_exemption(salary) == 0.0


def test_hra_exemption_no_hra_received() -> None:
    salary = SalaryDetails(basic_monthly=50_000, rent_paid_monthly=20_000, is_metro_city=True)
    assert compute_hra_exemption(salary) == 0.0


def test_hra_exemption_empty_salary() -> None:
    assert compute_hra_exemption(SalaryDetails()) == 0.0


def test_hra_breakdown_annualised() -> None:
    salary = SalaryDetails(
        basic_monthly=50_000, hra_received_monthly=25_000,
        rent_paid_monthly=20_000, is_metro_city=True,
    )
    bd = hra_breakdown(salary)
    assert bd.months == 12
    assert bd.rule_1_hra_received == pytest.approx(300_000)
    assert bd.rule_2_basic_share == pytest.approx(300_000)
    assert bd.rule_3_rent_over_tenth_basic == pytest.approx(180_000)
    assert bd.exemption == pytest.approx(180_000)


def test_hra_breakdown_monthly_matches_exemption() -> None:
    salary = SalaryDetails(
        basic_monthly=80_000, hra_received_monthly=32_000,
        rent_paid_monthly=25_000, is_metro_city=False,
    )
    assert hra_breakdown(salary, months=1).exemption == pytest.approx(compute_hra_exemption(salary))
