# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from enum import Enum

__version__ = "0.1.0"

BPS_PER_PERCENT = 100.0
BPS_PER_UNIT = 10_000.0


class BondType(Enum):
    CORPORATE = "corporate"
    MUNICIPAL = "municipal"
    TREASURY = "treasury"
    OTHER = "other"


class SpreadLevel(Enum):
    VERY_WIDE = "Very Wide"
    WIDE = "Wide"
    MODERATE = "Moderate"
    NARROW = "Narrow"
    NEGATIVE = "Negative"


# (very wide, wide, moderate, narrow) lower bounds in bps
_SPREAD_THRESHOLDS: dict[BondType, tuple[float, float, float, float]] = {
    BondType.CORPORATE: (300.0, 150.0, 50.0, 0.0),
    BondType.MUNICIPAL: (200.0, 100.0, 25.0, 0.0),
    BondType.TREASURY: (200.0, 100.0, 25.0, 0.0),
    BondType.OTHER: (200.0, 100.0, 25.0, 0.0),
}


# =============================================================================
# Yield Spreads
# =============================================================================

def yield_spread_bps(bond_yield: float, benchmark_yield: float) -> float:
    """
    Spread of a bond's yield over a benchmark, in basis points.

    Args:
        bond_yield: Bond yield as percentage (e.g. 5.25 for 5.25%)
        benchmark_yield: Benchmark yield as percentage

    Returns:
        (bond_yield - benchmark_yield) × 100
    """
    return (bond_yield - benchmark_yield) * BPS_PER_PERCENT


def spread_level(spread_bps: float, bond_type: BondType | str = BondType.CORPORATE) -> SpreadLevel:
    """
    Bucket a spread by width. Corporate spreads use wider buckets than
    municipal, treasury and other bonds.

    Raises:
        ValueError: If bond_type is not a known BondType value
    """
    very_wide, wide, moderate, narrow = _SPREAD_THRESHOLDS[BondType(bond_type)]
    if spread_bps >= very_wide:
        return SpreadLevel.VERY_WIDE
    if spread_bps >= wide:
        return SpreadLevel.WIDE
    if spread_bps >= moderate:
        return SpreadLevel.MODERATE
    if spread_bps >= narrow:
        return SpreadLevel.NARROW
    return SpreadLevel.NEGATIVE


# =============================================================================
# Dollar Risk
# =============================================================================

def dollar_duration(clean_price: float, modified_duration: float) -> float:
    """
    Modified duration times price: the price sensitivity per unit (100%) change
    in yield. Divide by 100 for a 1% move, by 10,000 for one basis point.

    Raises:
        ValueError: If clean_price or modified_duration is negative
    """
    if clean_price < 0:
        raise ValueError(f"clean_price must be non-negative, got {clean_price}")
    if modified_duration < 0:
        raise ValueError(f"modified_duration must be non-negative, got {modified_duration}")
    return modified_duration * clean_price


def price_value_of_basis_point(clean_price: float, modified_duration: float) -> float:
    """PVBP: price change for a one basis point yield move."""
    return dollar_duration(clean_price, modified_duration) / BPS_PER_UNIT


def spread_duration_price_change(
        clean_price: float,
        spread_duration_years: float,
        spread_change_bps: float
) -> tuple[float, float]:
    """
    Linear price impact of a credit spread move.

    Formula:
        ΔP = -D_spread × Δs × P,   Δs = spread_change_bps / 10,000

    Args:
        clean_price: Current clean price
        spread_duration_years: Spread duration in years
        spread_change_bps: Spread move in basis points (positive = widening)

    Returns:
        (price_change, new_price)

    Raises:
        ValueError: If clean_price or spread_duration_years is negative
    """
    if clean_price < 0:
        raise ValueError(f"clean_price must be non-negative, got {clean_price}")
    if spread_duration_years < 0:
        raise ValueError(f"spread_duration_years must be non-negative, got {spread_duration_years}")
    price_change = -spread_duration_years * (spread_change_bps / BPS_PER_UNIT) * clean_price
    return price_change, clean_price + price_change
