from .content_range import parse_content_range
from .rows import day_bounds, month_bounds, parse_date, parse_enum, parse_timestamp

__all__ = [
    "parse_content_range",
    "day_bounds",
    "month_bounds",
    "parse_date",
    "parse_enum",
    "parse_timestamp",
]
