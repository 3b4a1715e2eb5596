"""Rounding helpers shared by the engines.

Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``); set
counts, scores and loads here round halves away from zero instead.
"""
import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_to_step(value: float, step: float) -> float:
    """Round ``value`` to the nearest multiple of ``step``."""
    return round_half_away(value / step) * step
