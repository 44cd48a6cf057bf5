"""Progress reporting: audio position and duration to a 0-100 percentage."""

from __future__ import annotations

import math

MIN_PERCENT = 0.0
MAX_PERCENT = 100.0


def report_progress(position: float | None, duration: float | None) -> float:
    """Return how far *position* is through *duration*, as a percentage.

    A duration that is unknown, zero, negative or not finite yields 0.0, as
    does an unusable position. The result is clamped to [0, 100].
    """
    if duration is None or not math.isfinite(duration) or duration <= 0:
        return MIN_PERCENT
    if position is None or not math.isfinite(position) or position <= 0:
        return MIN_PERCENT

    percent = (position / duration) * 100
    return min(MAX_PERCENT, max(MIN_PERCENT, percent))
