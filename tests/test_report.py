"""Presentation-facing report value tests."""
from __future__ import annotations

import pytest

from taxcalc.engine.report import report_lines, slab_label, slab_rate_rows, tax_distribution
from taxcalc.engine.schemas import TaxSlab
from taxcalc.engine.slabs import NEW_REGIME_SLABS, OLD_REGIME_SLABS
from taxcalc.engine.tax_engine import compare_regimes
from taxcalc.inputs.schemas import TaxInputs
from tests.demo_profiles import DEMO_PROFILES


def test_new_regime_slab_labels() -> None:
    assert [slab_label(s) for s in NEW_REGIME_SLABS.slabs] == [
        "Up to ₹4L",
        "₹4.0L-₹8.0L",
        "₹8.0L-₹12.0L",
        "₹12.0L-₹16.0L",
        "₹16.0L-₹20.0L",
        "₹20.0L-₹24.0L",
        "Above ₹24L",
    ]


def test_old_regime_edge_labels() -> None:
    rows = slab_rate_rows(OLD_REGIME_SLABS)
    assert rows[0] == {"name": "Up to ₹3L", "rate": 0}
    assert rows[-1] == {"name": "Above ₹15L", "rate": 30}


def test_single_unbounded_slab_label() -> None:
    assert slab_label(TaxSlab(lower_bound=0, rate=10)) == "All income"


def test_tax_distribution() -> None:
    result = compare_regimes(TaxInputs(gross_income=1_200_000))
    assert tax_distribution(result) == [
        {"name": "New Regime Tax", "value": pytest.approx(52_500)},
        {"name": "Old Regime Tax", "value": pytest.approx(72_500)},
    ]


def test_report_lines_totals() -> None:
    result = compare_regimes(TaxInputs(**DEMO_PROFILES["meera"]["profile"]))
    lines = report_lines(result)

    new_rows = dict(lines["new"])
    assert new_rows["Standard Deduction"] == 75_000
    assert new_rows["Total New Regime Tax"] == pytest.approx(93_750)

    old_rows = lines["old"]
    labels = [label for label, _ in old_rows]
    components = old_rows[1:labels.index("Total Deductions")]
    assert sum(amount for _, amount in components) == pytest.approx(dict(old_rows)["Total Deductions"])
    assert old_rows[-1] == ("Total Old Regime Tax", pytest.approx(25_200))


def test_report_slab_rows_only_contributing_slabs() -> None:
    result = compare_regimes(TaxInputs(gross_income=1_200_000))
    slab_rows = [label for label, _ in report_lines(result)["new"] if "×" in label]
    # taxable 1125000 spans the first three slabs
    assert len(slab_rows) == 3
    assert slab_rows[0].startswith("Up to ₹4L")
