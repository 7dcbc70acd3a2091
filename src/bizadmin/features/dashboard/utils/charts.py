"""Growth percentages, month buckets and chart axis ticks for dashboards."""

import math
from datetime import date
from typing import List, Optional, Sequence, Tuple

MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def growth_percentage(total: Optional[int], today: Optional[int]) -> str:
    """Growth of ``total`` caused by today's additions, e.g. ``"+25.0%"``.

    Everything added today reads as ``"+100%"``; no data reads as ``"+0%"``.
    """
    if not total or not today:
        return "+0%"
    if total == today:
        return "+100%"

    previous = total - today
    rate = today / previous * 100 if previous > 0 else 0.0
    return f"{'+' if rate > 0 else ''}{rate:.1f}%"


def y_axis_max(values: Sequence[float]) -> int:
    """Round the largest value up to a readable axis maximum."""
    if not values:
        return 2

    peak = max(values)
    if peak <= 2:
        return 2
    if peak <= 5:
        return math.ceil(peak)
    if peak <= 10:
        return math.ceil(peak / 2) * 2
    if peak <= 30:
        return math.ceil(peak / 5) * 5
    if peak <= 100:
        return math.ceil(peak / 10) * 10
    return math.ceil(peak / 100) * 100


def _label_step(maximum: int) -> int:
    if maximum <= 5:
        return 1
    if maximum <= 10:
        return 2
    if maximum <= 30:
        return 5
    if maximum <= 100:
        return 10
    return 100


def y_axis_labels(maximum: int) -> List[int]:
    """Tick values from 0 to ``maximum`` inclusive."""
    return list(range(0, maximum + 1, _label_step(maximum)))


def segment_count(maximum: int) -> int:
    """Number of horizontal grid segments for an axis topping out at ``maximum``."""
    if maximum <= 2:
        return 2
    if maximum <= 5:
        return maximum
    return 5


def recent_months(today: date, count: int = 5) -> List[Tuple[int, int]]:
    """The last ``count`` calendar months ending with ``today``'s, oldest first.

    Returned as ``(year, month)`` pairs; months before January fall into the
    previous year.
    """
    months = []
    for back in range(count - 1, -1, -1):
        index = today.year * 12 + (today.month - 1) - back
        months.append((index // 12, index % 12 + 1))
    return months


def month_label(month: int) -> str:
    return MONTH_LABELS[month - 1]
