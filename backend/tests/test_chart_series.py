# backend/tests/test_chart_series.py
from shopify_dashboard.analytics.chart_series import build_series, flatten_series


def test_groups_by_name_in_first_seen_order():
    series = build_series([
        ("Mug", "US", 10.0),
        ("Beans", "CA", 20.0),
        ("Mug", "DE", 5.0),
    ])
    assert [s.name for s in series] == ["Mug", "Beans"]
    assert series[0].data == [("US", 10.0), ("DE", 5.0)]
    assert series[1].data == [("CA", 20.0)]


def test_duplicate_categories_are_summed_not_dropped():
    series = build_series([
        ("Mug", "US", 10.0),
        ("Mug", "DE", 5.0),
        ("Mug", "US", 2.5),
    ])
    assert len(series) == 1
    assert series[0].data == [("US", 12.5), ("DE", 5.0)]
    categories = [c for c, _ in series[0].data]
    assert len(categories) == len(set(categories))


def test_merge_is_idempotent():
    triples = [("A", "x", 1.0), ("B", "y", 2.0), ("A", "x", 3.0), ("A", "z", 4.0), ("B", "y", 0.5)]
    once = build_series(triples)
    twice = build_series(flatten_series(once))
    assert twice == once


def test_empty():
    assert build_series([]) == []
