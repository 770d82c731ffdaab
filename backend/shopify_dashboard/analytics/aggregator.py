# backend/shopify_dashboard/analytics/aggregator.py
import re
import logging
import datetime as dt
from typing import List, Optional, Sequence, Tuple, Union

from shopify_dashboard.analytics.amounts import amount_or_zero, parse_amount, price_key
from shopify_dashboard.analytics.chart_series import Triple, build_series
from shopify_dashboard.analytics.daily_revenue import bucketize
from shopify_dashboard.analytics.grouping import count_by, round_values, sum_by
from shopify_dashboard.analytics.referrals import Referral, classify
from shopify_dashboard.errors import InvalidDateError, MalformedURLError
from shopify_dashboard.schemas.metrics import Metrics
from shopify_dashboard.schemas.orders import LineItem, Order

logger = logging.getLogger(__name__)

DateLike = Union[str, dt.date]

ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}")


# ---------- date helpers ----------
def parse_date(value: DateLike, field: str = "date") -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = str(value).strip()
    try:
        if not ISO_DAY.fullmatch(text):
            raise ValueError(text)
        return dt.date.fromisoformat(text)
    except ValueError:
        raise InvalidDateError(f"{field} must be YYYY-MM-DD, got {value!r}") from None


def parse_date_range(start: DateLike, end: DateLike) -> Tuple[dt.date, dt.date]:
    start_date = parse_date(start, "start_date")
    end_date = parse_date(end, "end_date")
    if start_date > end_date:
        raise InvalidDateError(f"start_date {start_date} is after end_date {end_date}")
    return start_date, end_date


# ---------- revenue ----------
def total_revenue(orders: Sequence[Order]) -> float:
    """Sum of order totals (shipping and discounts included); bad totals add zero."""
    return round(sum(amount_or_zero(o.total_price) for o in orders), 2)


def average_revenue(total: float, start_date: dt.date, end_date: dt.date) -> float:
    """
    Revenue per day over the window, dividing by (end - start) days.
    A single-day window has a zero-day span; its average is the total.
    """
    day_count = (end_date - start_date).days
    if day_count == 0:
        return total
    return round(total / day_count, 2)


def _referral(order: Order) -> Optional[Referral]:
    # no referring_site field at all: order stays out of referral mappings
    if order.referring_site is None:
        return None
    try:
        return classify(order.referring_site)
    except MalformedURLError as e:
        logger.warning("Skipping referral attribution for order %s: %s", order.id, e)
        return None


def _price_sort_key(key: str) -> Tuple[bool, float, str]:
    amount = parse_amount(key)
    return (amount is None, amount or 0.0, key)


# ---------- aggregation ----------
def aggregate(orders: Sequence[Order], start_date: DateLike, end_date: DateLike) -> Metrics:
    start, end = parse_date_range(start_date, end_date)
    orders = list(orders)

    # Order-level dimensions
    currencies = count_by(orders, lambda o: o.currency)
    sales_per_country = count_by(orders, lambda o: o.country)

    # Flattened views collected in one pass
    items: List[Tuple[Order, LineItem]] = []
    referred: List[Tuple[Referral, Order]] = []
    referred_items: List[Tuple[Referral, LineItem]] = []
    country_triples: List[Triple] = []
    customer_triples: List[Triple] = []

    for order in orders:
        referral = _referral(order)
        if referral is not None:
            referred.append((referral, order))

        for line_item in order.line_items:
            items.append((order, line_item))
            price = amount_or_zero(line_item.price)
            if order.country is not None:
                country_triples.append((line_item.title, order.country, price))
            if order.customer_id is not None:
                customer_triples.append((line_item.title, order.customer_id, price))
            if referral is not None:
                referred_items.append((referral, line_item))

    # Products & prices
    products = count_by(items, lambda p: p[1].title)
    revenue_per_product = sum_by(items, lambda p: p[1].title, lambda p: amount_or_zero(p[1].price))
    prices = count_by(items, lambda p: price_key(p[1].price))
    revenue_per_price_point = sum_by(items, lambda p: price_key(p[1].price), lambda p: amount_or_zero(p[1].price))

    # Referrals
    referring_pages = count_by(referred, lambda r: r[0].page)
    referring_sites = count_by(referred, lambda r: r[0].site)
    revenue_per_referral_page = sum_by(referred_items, lambda r: r[0].page, lambda r: amount_or_zero(r[1].price))
    revenue_per_referral_site = sum_by(referred_items, lambda r: r[0].site, lambda r: amount_or_zero(r[1].price))

    total = total_revenue(orders)
    logger.info(
        "Aggregated %d orders (%d line items) for %s..%s: revenue %.2f",
        len(orders), len(items), start, end, total,
    )

    return Metrics(
        total_revenue=total,
        average_revenue=average_revenue(total, start, end),
        daily_revenue=bucketize(start, end, orders),
        currencies=currencies,
        sales_per_country=sales_per_country,
        revenue_per_country=build_series(country_triples),
        products=products,
        revenue_per_product=round_values(revenue_per_product),
        prices=dict(sorted(prices.items(), key=lambda kv: _price_sort_key(kv[0]))),
        revenue_per_price_point=round_values(
            dict(sorted(revenue_per_price_point.items(), key=lambda kv: _price_sort_key(kv[0])))
        ),
        customer_sales=build_series(customer_triples),
        referring_sites=dict(sorted(referring_sites.items())),
        referring_pages=dict(sorted(referring_pages.items())),
        revenue_per_referral_site=round_values(dict(sorted(revenue_per_referral_site.items()))),
        revenue_per_referral_page=round_values(dict(sorted(revenue_per_referral_page.items()))),
    )
