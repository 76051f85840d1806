"""
HRA exemption — Section 10(13A), least of three rules.

Works on whatever period the SalaryDetails figures are in (monthly by
contract); never mix monthly basic with annual rent.
"""
from __future__ import annotations

from taxcalc.engine.schemas import HRABreakdown
from taxcalc.inputs.schemas import SalaryDetails

HRA_METRO_PCT     = 0.50
HRA_NON_METRO_PCT = 0.40
HRA_RENT_BASIC_PCT = 0.10


def _hra_rules(salary: SalaryDetails) -> tuple[float, float, float]:
    rule_1 = salary.hra_received_monthly
    rule_2 = (HRA_METRO_PCT if salary.is_metro_city else HRA_NON_METRO_PCT) * salary.basic_monthly
    rule_3 = max(0.0, salary.rent_paid_monthly - HRA_RENT_BASIC_PCT * salary.basic_monthly)  # MUST clip at 0
    return rule_1, rule_2, rule_3


def compute_hra_exemption(salary: SalaryDetails) -> float:
    """
    Monthly HRA exemption = min(rule 1, rule 2, rule 3).

    Rule 1: HRA received
    Rule 2: 50% of basic (metro) or 40% (non-metro)
    Rule 3: max(0, rent paid - 10% of basic)
    """
    return min(_hra_rules(salary))


def hra_breakdown(salary: SalaryDetails, months: int = 12) -> HRABreakdown:
    """The three rules and the exemption, each scaled to `months`."""
    rule_1, rule_2, rule_3 = _hra_rules(salary)
    return HRABreakdown(
        months=months,
        rule_1_hra_received=rule_1 * months,
        rule_2_basic_share=rule_2 * months,
        rule_3_rent_over_tenth_basic=rule_3 * months,
        exemption=min(rule_1, rule_2, rule_3) * months,
    )
