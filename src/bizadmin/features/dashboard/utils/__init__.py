from .charts import (
    MONTH_LABELS,
    growth_percentage,
    month_label,
    recent_months,
    segment_count,
    y_axis_labels,
    y_axis_max,
)

__all__ = [
    "MONTH_LABELS",
    "growth_percentage",
    "month_label",
    "recent_months",
    "segment_count",
    "y_axis_labels",
    "y_axis_max",
]
