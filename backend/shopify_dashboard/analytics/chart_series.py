# backend/shopify_dashboard/analytics/chart_series.py
from typing import Dict, Iterable, List, Tuple

from shopify_dashboard.schemas.metrics import ChartSeries

Triple = Tuple[str, str, float]


def build_series(triples: Iterable[Triple]) -> List[ChartSeries]:
    """
    Group (series, category, value) triples into stacked-chart series.

    Series keep first-seen order. Within a series, points sharing a category
    are summed into one point placed where the category first appeared.
    """
    grouped: Dict[str, Dict[str, float]] = {}
    for name, category, value in triples:
        points = grouped.setdefault(name, {})
        points[category] = points.get(category, 0.0) + float(value)

    return [
        ChartSeries(name=name, data=[(category, round(total, 2)) for category, total in points.items()])
        for name, points in grouped.items()
    ]


def flatten_series(series: Iterable[ChartSeries]) -> List[Triple]:
    """Inverse view of build_series: one triple per data point."""
    return [(s.name, category, value) for s in series for category, value in s.data]
