# backend/shopify_dashboard/analytics/amounts.py
import math
from typing import Optional, Union

AmountLike = Union[str, int, float, None]


def parse_amount(value: AmountLike) -> Optional[float]:
    """Monetary text/number -> float; None when missing or not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    return amount if math.isfinite(amount) else None


def amount_or_zero(value: AmountLike) -> float:
    amount = parse_amount(value)
    return amount if amount is not None else 0.0


def price_key(value: AmountLike) -> Optional[str]:
    """Price-point label: "5.00" and 5.0 land on the same key. No price, no key."""
    if value is None:
        return None
    amount = parse_amount(value)
    if amount is None:
        return str(value)
    return f"{amount:.2f}"
