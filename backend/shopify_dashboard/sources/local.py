# backend/shopify_dashboard/sources/local.py
import logging
import datetime as dt
from typing import Dict, List, Optional

from shopify_dashboard.db.session import get_sqlite_conn, make_engine, maybe_bootstrap
from shopify_dashboard.schemas.orders import Order

logger = logging.getLogger(__name__)


class LocalOrderSource:
    """
    Orders read from a SQLite mirror of the shop (demo/offline mode).
    The window is applied on the calendar-day part of created_at.
    """

    def __init__(self, database_url: Optional[str] = None, engine=None, bootstrap: bool = True):
        self.engine = engine if engine is not None else make_engine(database_url)
        if bootstrap:
            maybe_bootstrap(self.engine)

    def close(self) -> None:
        self.engine.dispose()

    def fetch(self, start_date: dt.date, end_date: dt.date) -> List[Order]:
        with get_sqlite_conn(self.engine) as conn:
            order_rows = conn.execute(
                """
                SELECT id, created_at, total_price, currency, country, referring_site, customer_id
                FROM orders
                WHERE substr(created_at, 1, 10) BETWEEN ? AND ?
                ORDER BY created_at, id
                """,
                (start_date.isoformat(), end_date.isoformat()),
            ).fetchall()
            item_rows = conn.execute(
                """
                SELECT li.order_id, li.title, li.price
                FROM line_items li
                JOIN orders o ON o.id = li.order_id
                WHERE substr(o.created_at, 1, 10) BETWEEN ? AND ?
                ORDER BY li.order_id, li.position, li.id
                """,
                (start_date.isoformat(), end_date.isoformat()),
            ).fetchall()

        items: Dict[int, List[dict]] = {}
        for r in item_rows:
            items.setdefault(r["order_id"], []).append({"title": r["title"], "price": r["price"]})

        orders = [
            Order(
                id=r["id"],
                created_at=r["created_at"],
                total_price=r["total_price"],
                currency=r["currency"],
                billing_address={"country": r["country"]} if r["country"] is not None else None,
                referring_site=r["referring_site"],
                customer={"id": r["customer_id"]} if r["customer_id"] is not None else None,
                line_items=items.get(r["id"], []),
            )
            for r in order_rows
        ]
        logger.info("Loaded %d local orders for %s..%s", len(orders), start_date, end_date)
        return orders
