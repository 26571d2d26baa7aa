"""Randomized pacing between page actions.

Scripted sessions that act at a fixed cadence are easy to spot, so every
navigation and interaction is followed by a uniform random pause. Ranges
are in milliseconds, matching ``page.wait_for_timeout``.
"""
import math
import random

# (min, max) in milliseconds
NAVIGATION_WAIT = (4000, 7000)
CLICK_WAIT = (3000, 7000)
TYPING_WAIT = (3000, 8000)
DEFAULT_WAIT = (5000, 12000)


def _safe_ms(val, default: int) -> int:
    try:
        f = float(val)
        if math.isfinite(f):
            return int(f)
    except (TypeError, ValueError):
        pass
    return default


def random_wait_ms(wait_min: int, wait_max: int) -> int:
    """Return a uniform random wait in ``[wait_min, wait_max]``, inclusive.

    Bounds given in the wrong order are swapped and negative bounds are
    clamped to zero. Non-numeric bounds fall back to ``DEFAULT_WAIT``.
    """
    low = max(0, _safe_ms(wait_min, DEFAULT_WAIT[0]))
    high = max(0, _safe_ms(wait_max, DEFAULT_WAIT[1]))
    if high < low:
        low, high = high, low
    return random.randint(low, high)
