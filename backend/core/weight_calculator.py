"""
Percentage-of-max weight calculation.

Turns a one-rep max and a programmed percentage into a working weight that can
actually be loaded on a bar, i.e. rounded to the nearest plate increment.
"""

import math
from typing import List, Optional, Union

Number = Union[int, float]

DEFAULT_INCREMENT = 5


def round_to_nearest(value: Optional[Number], increment: Number = DEFAULT_INCREMENT) -> Optional[Number]:
    """
    Round a weight to the nearest increment.

    Exact midpoints round toward the more positive multiple
    (22.5 -> 25, -12.5 -> -10); other negatives round to the nearest
    multiple (-7 -> -5, -13 -> -15).

    Args:
        value: Weight to round; None propagates unchanged
        increment: Plate increment (default 5)

    Returns:
        Rounded weight, or None if value is None. Infinities and NaN are
        returned unchanged.
    """
    if value is None:
        return None
    if not math.isfinite(value):
        return value
    return math.floor(value / increment + 0.5) * increment


def round_to_nearest_5(value: Optional[Number]) -> Optional[Number]:
    return round_to_nearest(value, 5)


def calculate(
    max_lift: Optional[Number],
    percentage: Number,
    increment: Number = DEFAULT_INCREMENT,
) -> Optional[Number]:
    """
    Calculate the working weight for a percentage of a one-rep max.

    Args:
        max_lift: The member's one-rep max; None means "not yet set"
        percentage: Percentage of max, e.g. 75 for 75%
        increment: Plate increment used for rounding

    Returns:
        Rounded working weight, or None when max_lift is None

    Example:
        >>> calculate(200, 75)
        150
        >>> calculate(None, 75) is None
        True
    """
    if max_lift is None:
        return None
    return round_to_nearest(max_lift * percentage / 100, increment)


def calculate_per_set(
    max_lift: Optional[Number],
    percentages: List[Number],
    increment: Number = DEFAULT_INCREMENT,
) -> Optional[List[Number]]:
    """One weight per set, in set order. None when max_lift is None."""
    if max_lift is None:
        return None
    return [calculate(max_lift, pct, increment) for pct in percentages]
