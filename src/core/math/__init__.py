"""
Core math modules для Vortex Matrix

Математические примитивы и численные проверки с гарантией стабильности.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_DEDUP_PRICE,
    EPS_DEDUP_TIME,
    EPS_DENOM,
    # NaN/Inf checks
    is_valid_float,
    validate_finite,
    # Epsilon comparisons
    in_unit_interval,
    is_near_zero,
    within_tolerance,
    # Rounding
    round_half_up,
)

# Digital Root
from src.core.math.digital_root import PRICE_SCALE, digital_root

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_DEDUP_PRICE",
    "EPS_DEDUP_TIME",
    "EPS_DENOM",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    "validate_finite",
    # Numerical Safeguards — Epsilon comparisons
    "in_unit_interval",
    "is_near_zero",
    "within_tolerance",
    # Numerical Safeguards — Rounding
    "round_half_up",
    # Digital Root
    "PRICE_SCALE",
    "digital_root",
]
