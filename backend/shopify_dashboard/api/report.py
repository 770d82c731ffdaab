# backend/shopify_dashboard/api/report.py
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Iterator, List, Optional, Protocol
import logging, datetime as dt

from shopify_dashboard.analytics import aggregate, parse_date_range
from shopify_dashboard.config import ShopConfig, order_source_kind
from shopify_dashboard.errors import ConfigError, InvalidDateError, OrderSourceError
from shopify_dashboard.schemas.metrics import Metrics
from shopify_dashboard.schemas.orders import Order

router = APIRouter(prefix="/api", tags=["report"])
logger = logging.getLogger(__name__)


class OrderSource(Protocol):
    def fetch(self, start_date: dt.date, end_date: dt.date) -> List[Order]: ...

    def close(self) -> None: ...


# ---- order source wiring (overridden in tests) ----
def _build_order_source() -> OrderSource:
    kind = order_source_kind()
    if kind == "local":
        from shopify_dashboard.sources.local import LocalOrderSource
        return LocalOrderSource()
    from shopify_dashboard.sources.shopify import ShopifyOrderSource
    return ShopifyOrderSource(ShopConfig.from_env())


def get_order_source() -> Iterator[OrderSource]:
    """One source per request, closed once the response is built."""
    try:
        source = _build_order_source()
    except ConfigError as e:
        logger.error("Order source is not configured: %s", e)
        raise HTTPException(status_code=503, detail=str(e))
    try:
        yield source
    finally:
        source.close()


def resolve_window(from_: Optional[str], to: Optional[str], today: Optional[dt.date] = None):
    """
    No `to`  -> today. No `from` -> same day as `to`.
    Blank query values count as missing.
    """
    today_s = (today or dt.date.today()).isoformat()
    to = (to or "").strip() or today_s
    from_ = (from_ or "").strip() or to
    return parse_date_range(from_, to)


@router.get("/report", response_model=Metrics)
def revenue_report(
    from_: Optional[str] = Query(None, alias="from", description="YYYY-MM-DD"),
    to: Optional[str] = Query(None, description="YYYY-MM-DD"),
    source: OrderSource = Depends(get_order_source),
):
    try:
        start_date, end_date = resolve_window(from_, to)
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        orders = source.fetch(start_date, end_date)
    except OrderSourceError as e:
        logger.error("Order fetch failed for %s..%s: %s", start_date, end_date, e)
        raise HTTPException(status_code=502, detail=str(e))

    return aggregate(orders, start_date, end_date)
