from .aggregator import aggregate, parse_date_range
from .chart_series import build_series
from .daily_revenue import bucketize
from .grouping import count_by, sum_by
from .referrals import classify

__all__ = [
    "aggregate", "parse_date_range", "build_series", "bucketize", "count_by", "sum_by", "classify"
]
