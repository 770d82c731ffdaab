# backend/tests/test_grouping.py
from shopify_dashboard.analytics.amounts import parse_amount, price_key
from shopify_dashboard.analytics.grouping import count_by, sum_by


def test_count_by_keeps_duplicates_and_first_seen_order():
    out = count_by(["b", "a", "b", "c", "b"], lambda x: x)
    assert out == {"b": 3, "a": 1, "c": 1}
    assert list(out) == ["b", "a", "c"]


def test_count_by_skips_missing_keys():
    records = [{"currency": "USD"}, {"currency": None}, {}, {"currency": "EUR"}]
    assert count_by(records, lambda r: r.get("currency")) == {"USD": 1, "EUR": 1}


def test_sum_by_accumulates_per_key():
    rows = [("Widget", 5.0), ("Gadget", 2.5), ("Widget", 1.25)]
    assert sum_by(rows, lambda r: r[0], lambda r: r[1]) == {"Widget": 6.25, "Gadget": 2.5}


def test_empty_input():
    assert count_by([], lambda x: x) == {}
    assert sum_by([], lambda x: x, lambda x: 1) == {}


def test_parse_amount_tolerates_bad_values():
    assert parse_amount("19.99") == 19.99
    assert parse_amount(" 5 ") == 5.0
    assert parse_amount(7) == 7.0
    assert parse_amount(None) is None
    assert parse_amount("free") is None
    assert parse_amount("nan") is None


def test_price_key_normalizes_numbers():
    assert price_key("5.00") == price_key(5.0) == "5.00"
    assert price_key("n/a") == "n/a"
    assert price_key(None) is None
