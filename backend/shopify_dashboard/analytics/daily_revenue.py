# backend/shopify_dashboard/analytics/daily_revenue.py
import logging
import datetime as dt
from typing import Dict, Iterable, Optional

from shopify_dashboard.analytics.amounts import amount_or_zero
from shopify_dashboard.schemas.orders import Order

logger = logging.getLogger(__name__)


def day_range(start_date: dt.date, end_date: dt.date) -> Iterable[dt.date]:
    """Every calendar day from start to end, inclusive."""
    for offset in range((end_date - start_date).days + 1):
        yield start_date + dt.timedelta(days=offset)


def order_day(order: Order) -> Optional[dt.date]:
    """
    Calendar day the order was placed on, as the shop saw it.
    Only the date part of created_at is used; no timezone conversion.
    """
    try:
        return dt.date.fromisoformat(order.created_at.strip()[:10])
    except ValueError:
        return None


def bucketize(start_date: dt.date, end_date: dt.date, orders: Iterable[Order]) -> Dict[str, float]:
    revenue_per_day: Dict[str, float] = {d.isoformat(): 0.0 for d in day_range(start_date, end_date)}

    for order in orders:
        day = order_day(order)
        if day is None:
            logger.warning("Order %s has unparseable created_at %r", order.id, order.created_at)
            continue
        key = day.isoformat()
        if key not in revenue_per_day:
            # outside the window the source was asked for
            logger.debug("Order %s on %s falls outside report window", order.id, key)
            continue
        revenue_per_day[key] += amount_or_zero(order.total_price)

    return {day: round(total, 2) for day, total in revenue_per_day.items()}
