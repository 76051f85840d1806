"""
Slab tax calculator — FY 2025-26 (AY 2026-27).
Pure Python, deterministic. Same input → same output.

Bounds are inclusive integers spaced 1 apart (0–4,00,000 then 4,00,001–8,00,000),
so a bounded slab holds upper - lower + 1 rupees. The first slab starts at 0,
which is not a rupee of income: counting from rupee 1 it holds `upper` rupees.
That makes ₹4,00,000 fully zero-rated and taxes the 4,00,001st rupee at 5%.
"""
from __future__ import annotations

import logging

from taxcalc.engine.schemas import RegimeSlabTable, SlabContribution, TaxSlab

logger = logging.getLogger(__name__)

# Rupees in an inclusive [lower, upper] slab = upper - lower + INCLUSIVE_BOUND_WIDTH
INCLUSIVE_BOUND_WIDTH = 1

# ===========================================================================
# NEW REGIME SLAB BREAKPOINTS — Budget 2025
# ===========================================================================

NEW_SLAB_4L  = 400_000
NEW_SLAB_8L  = 800_000
NEW_SLAB_12L = 1_200_000
NEW_SLAB_16L = 1_600_000
NEW_SLAB_20L = 2_000_000
NEW_SLAB_24L = 2_400_000

# ===========================================================================
# OLD REGIME SLAB BREAKPOINTS
# ===========================================================================

OLD_SLAB_3L  = 300_000
OLD_SLAB_7L  = 700_000
OLD_SLAB_10L = 1_000_000
OLD_SLAB_12L = 1_200_000
OLD_SLAB_15L = 1_500_000

# ===========================================================================
# SLAB TABLES — rate in percent
# ===========================================================================

NEW_REGIME_SLABS = RegimeSlabTable(
    regime="new",
    slabs=(
        TaxSlab(lower_bound=0,                upper_bound=NEW_SLAB_4L,  rate=0),    # 0–4L
        TaxSlab(lower_bound=NEW_SLAB_4L + 1,  upper_bound=NEW_SLAB_8L,  rate=5),    # 4–8L
        TaxSlab(lower_bound=NEW_SLAB_8L + 1,  upper_bound=NEW_SLAB_12L, rate=10),   # 8–12L
        TaxSlab(lower_bound=NEW_SLAB_12L + 1, upper_bound=NEW_SLAB_16L, rate=15),   # 12–16L
        TaxSlab(lower_bound=NEW_SLAB_16L + 1, upper_bound=NEW_SLAB_20L, rate=20),   # 16–20L
        TaxSlab(lower_bound=NEW_SLAB_20L + 1, upper_bound=NEW_SLAB_24L, rate=25),   # 20–24L
        TaxSlab(lower_bound=NEW_SLAB_24L + 1, rate=30),                             # >24L
    ),
)

OLD_REGIME_SLABS = RegimeSlabTable(
    regime="old",
    slabs=(
        TaxSlab(lower_bound=0,                upper_bound=OLD_SLAB_3L,  rate=0),    # 0–3L
        TaxSlab(lower_bound=OLD_SLAB_3L + 1,  upper_bound=OLD_SLAB_7L,  rate=5),    # 3–7L
        TaxSlab(lower_bound=OLD_SLAB_7L + 1,  upper_bound=OLD_SLAB_10L, rate=10),   # 7–10L
        TaxSlab(lower_bound=OLD_SLAB_10L + 1, upper_bound=OLD_SLAB_12L, rate=15),   # 10–12L
        TaxSlab(lower_bound=OLD_SLAB_12L + 1, upper_bound=OLD_SLAB_15L, rate=20),   # 12–15L
        TaxSlab(lower_bound=OLD_SLAB_15L + 1, rate=30),                             # >15L
    ),
)


# ===========================================================================
# INTERNAL HELPERS
# ===========================================================================

def slab_width(slab: TaxSlab) -> float:
    """Rupees of income a slab can hold; inf for the unbounded slab."""
    if slab.is_unbounded:
        return float("inf")
    first_rupee = max(slab.lower_bound, 1)
    return slab.upper_bound - first_rupee + INCLUSIVE_BOUND_WIDTH


def slab_breakdown(taxable_income: float, table: RegimeSlabTable) -> list[SlabContribution]:
    """
    Walk the slab table and return each contributing slab as a line item.

    Per slab: taxable amount = min(remaining, width), tax = fixed_amount +
    amount * rate / 100. A slab surcharge is a percentage of the running
    total (this slab included) and is added to the running total at once.
    Stops as soon as no income remains.
    """
    remaining = max(0.0, float(taxable_income))
    running_total = 0.0
    lines: list[SlabContribution] = []
    for slab in table.slabs:
        if remaining <= 0:
            break
        amount = min(remaining, slab_width(slab))
        rate_tax = amount * slab.rate / 100
        running_total += slab.fixed_amount + rate_tax
        surcharge = 0.0
        if slab.surcharge_percent:
            surcharge = running_total * slab.surcharge_percent / 100
            running_total += surcharge
        lines.append(SlabContribution(
            lower_bound=slab.lower_bound,
            upper_bound=slab.upper_bound,
            rate=slab.rate,
            taxable_amount=amount,
            rate_tax=rate_tax,
            fixed_amount=slab.fixed_amount,
            surcharge=surcharge,
            tax=slab.fixed_amount + rate_tax + surcharge,
        ))
        remaining -= amount
    return lines


# ===========================================================================
# PUBLIC API
# ===========================================================================

def compute_slab_tax(taxable_income: float, table: RegimeSlabTable) -> float:
    """Progressive slab tax on taxable_income. Zero or negative income → 0."""
    if taxable_income <= 0:
        return 0.0
    lines = slab_breakdown(taxable_income, table)
    logger.debug("Slab tax: regime=%s slabs_used=%d", table.regime, len(lines))
    return sum(line.tax for line in lines)


def marginal_rate(taxable_income: float, table: RegimeSlabTable) -> float:
    """
    Rate (as a fraction) applied to the last rupee of taxable_income.
    Returns 0.0 when there is no taxable income.
    """
    lines = slab_breakdown(taxable_income, table)
    if not lines:
        return 0.0
    return lines[-1].rate / 100
