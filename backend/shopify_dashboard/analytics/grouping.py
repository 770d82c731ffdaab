# backend/shopify_dashboard/analytics/grouping.py
"""
Counting and summing over records keyed by an extracted field.
Keys keep first-seen order; a key function returning None skips the record.
"""
from typing import Callable, Dict, Hashable, Iterable, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def count_by(records: Iterable[T], key_fn: Callable[[T], Optional[K]]) -> Dict[K, int]:
    out: Dict[K, int] = {}
    for r in records:
        key = key_fn(r)
        if key is None:
            continue
        out[key] = out.get(key, 0) + 1
    return out


def sum_by(
    records: Iterable[T],
    key_fn: Callable[[T], Optional[K]],
    value_fn: Callable[[T], float],
) -> Dict[K, float]:
    out: Dict[K, float] = {}
    for r in records:
        key = key_fn(r)
        if key is None:
            continue
        out[key] = out.get(key, 0.0) + float(value_fn(r))
    return out


def round_values(mapping: Dict[K, float], ndigits: int = 2) -> Dict[K, float]:
    return {k: round(v, ndigits) for k, v in mapping.items()}
