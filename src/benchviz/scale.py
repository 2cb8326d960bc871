"""
Coordinate mapping from benchmark values to canvas pixels.
"""


def vmap(value: float, low1: float, high1: float, low2: float, high2: float) -> float:
    """Linearly map value from [low1, high1] into [low2, high2].

    Values outside the source interval extrapolate; nothing is clamped, so a
    benchmark past the configured maximum draws a longer bar. A degenerate
    source interval (low1 == high1) gives NaN.
    """
    span = high1 - low1
    if span == 0:
        return float("nan")
    return low2 + (high2 - low2) * (value - low1) / span
