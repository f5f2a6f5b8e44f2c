"""
Core math modules

Классификация IEEE-754 double, порядок величины, ближайшая степень 10
и минимальное число значащих знаков после запятой.
"""

# Float Classification
from src.core.math.float_classification import (
    MIN_NORMAL,
    FloatCategory,
    classify_float,
    finite_or_none,
    is_normal_float,
    is_sub_threshold,
)

# Magnitude
from src.core.math.magnitude import (
    ORDER_UNDEFINED,
    closest_power_of_ten,
    order_of_magnitude,
    try_order_of_magnitude,
)

# Significant Decimals
from src.core.math.significant_decimals import (
    DECIMALS_UNDEFINED,
    MAX_SIGNIFICANT_DIGITS,
    RECURRING_KEPT_REPEATS,
    RECURRING_RUN_LENGTH,
    decimals_budget,
    round_trip_tolerance,
    round_trips,
    significant_decimals,
    try_significant_decimals,
)

__all__ = [
    # Float Classification — Constants
    "MIN_NORMAL",
    # Float Classification — Types
    "FloatCategory",
    # Float Classification — Functions
    "classify_float",
    "finite_or_none",
    "is_normal_float",
    "is_sub_threshold",
    # Magnitude — Constants
    "ORDER_UNDEFINED",
    # Magnitude — Functions
    "closest_power_of_ten",
    "order_of_magnitude",
    "try_order_of_magnitude",
    # Significant Decimals — Constants
    "DECIMALS_UNDEFINED",
    "MAX_SIGNIFICANT_DIGITS",
    "RECURRING_KEPT_REPEATS",
    "RECURRING_RUN_LENGTH",
    # Significant Decimals — Functions
    "decimals_budget",
    "round_trip_tolerance",
    "round_trips",
    "significant_decimals",
    "try_significant_decimals",
]
