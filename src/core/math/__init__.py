"""
Core math modules для hexcell-core

Математические примитивы с гарантией численной стабильности.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # NaN/Inf checks
    is_valid_float,
    # Rounding
    round_half_away_from_zero,
    # Epsilon comparisons
    is_close,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards: NaN/Inf checks
    "is_valid_float",
    # Numerical Safeguards: Rounding
    "round_half_away_from_zero",
    # Numerical Safeguards: Epsilon comparisons
    "is_close",
]
