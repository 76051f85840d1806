"""Settings and logging setup tests."""
from __future__ import annotations

import logging

import pytest

from taxcalc import config
from taxcalc.config import Settings
from taxcalc.engine.tax_engine import compare_regimes
from taxcalc.inputs.schemas import TaxInputs


def test_settings_defaults() -> None:
    s = Settings(_env_file=None)
    assert s.debug is False
    assert s.round_places == 2
    assert s.financial_year == "FY2025-26"


def test_settings_read_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAXCALC_DEBUG", "true")
    monkeypatch.setenv("TAXCALC_ROUND_PLACES", "0")
    s = Settings(_env_file=None)
    assert s.debug is True
    assert s.round_places == 0


def test_round_places_applied_to_results(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config.settings, "round_places", 0)
    # taxable = 400001 - ... → new regime tax 0.05 rounds to 0 at zero places
    result = compare_regimes(TaxInputs(gross_income=475_001))
    assert result.new_regime.tax_payable == 0.0


def test_configure_logging_sets_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(config.settings, "debug", True)
    config.configure_logging()
    assert calls and calls[0]["level"] == logging.DEBUG
