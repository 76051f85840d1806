"""
parsing.py — raw form text → numeric inputs.

Form fields arrive as strings. Empty or unparsable text counts as zero;
a numeric prefix is accepted the way a browser number parse does
("12000abc" → 12000). Parsing never raises.
"""
from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from taxcalc.inputs.schemas import (
    DeductionInputs,
    HomeLoanInputs,
    SalaryDetails,
    Section80DInputs,
    TaxInputs,
)

_NUMERIC_PREFIX = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_TRUE_FLAGS = frozenset({"1", "true", "yes", "on", "y", "checked"})


def parse_amount(raw: Optional[Any]) -> float:
    """
    Parse one amount field. None, blank, unparsable, negative, NaN or
    infinite input → 0.0. Thousands separators ("1,50,000") are ignored.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, (int, float)):
        number = raw
    else:
        text = str(raw).strip().replace(",", "").replace("₹", "").strip()
        match = _NUMERIC_PREFIX.match(text)
        if not match:
            return 0.0
        number = match.group(0)
    try:
        value = float(number)
    except (OverflowError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def parse_flag(raw: Optional[Any]) -> bool:
    """Checkbox-style flag: bools pass through, strings like "on"/"true"/"1" → True."""
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    return str(raw).strip().lower() in _TRUE_FLAGS


def build_tax_inputs(form: Mapping[str, Any]) -> TaxInputs:
    """
    Build a TaxInputs snapshot from flat form fields.

    Recognised keys (all optional, missing → 0 / False):
      income, basic, hra_received, rent_paid, metro_city,
      section_80c, health_self, health_parents, parents_senior,
      section_80ccd, section_80tta, section_80g,
      home_loan_principal, home_loan_interest, nps, education_loan
    """
    def amount(key: str) -> float:
        return parse_amount(form.get(key))

    return TaxInputs(
        gross_income=amount("income"),
        salary=SalaryDetails(
            basic_monthly=amount("basic"),
            hra_received_monthly=amount("hra_received"),
            rent_paid_monthly=amount("rent_paid"),
            is_metro_city=parse_flag(form.get("metro_city")),
        ),
        deductions=DeductionInputs(
            section_80c=amount("section_80c"),
            section_80d=Section80DInputs(
                self_and_family_premium=amount("health_self"),
                parents_premium=amount("health_parents"),
                parents_are_senior_citizens=parse_flag(form.get("parents_senior")),
            ),
            section_80ccd=amount("section_80ccd"),
            section_80tta=amount("section_80tta"),
            section_80g=amount("section_80g"),
            home_loan=HomeLoanInputs(
                principal=amount("home_loan_principal"),
                interest=amount("home_loan_interest"),
            ),
            nps_additional=amount("nps"),
            education_loan_interest=amount("education_loan"),
        ),
    )
