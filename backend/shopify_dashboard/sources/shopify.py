# backend/shopify_dashboard/sources/shopify.py
"""
Shopify Admin REST client for the order window of a report.
Pages through /orders.json with the Link header and validates each record.
"""
import logging
import datetime as dt
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from shopify_dashboard.config import ShopConfig
from shopify_dashboard.errors import OrderSourceError
from shopify_dashboard.schemas.orders import Order

logger = logging.getLogger(__name__)

ORDER_FIELDS = [
    "id",
    "total_price",
    "created_at",
    "billing_address",
    "currency",
    "line_items",
    "customer",
    "referring_site",
]
PAGE_LIMIT = 250


class ShopifyOrderSource:
    def __init__(self, config: ShopConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        self.session.auth = (config.api_key, config.password)
        self.session.headers.update({"Accept": "application/json"})

    def close(self) -> None:
        self.session.close()

    def _params(self, start_date: dt.date, end_date: dt.date) -> Dict[str, Any]:
        return {
            "status": "any",
            "created_at_min": f"{start_date.isoformat()}T00:00:00",
            "created_at_max": f"{end_date.isoformat()}T23:59:59",
            "limit": PAGE_LIMIT,
            "fields": ",".join(ORDER_FIELDS),
        }

    def _get(self, url: str, params: Optional[Dict[str, Any]]) -> requests.Response:
        try:
            resp = self.session.get(url, params=params, timeout=self.config.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise OrderSourceError(f"Shopify order request failed: {e}") from e
        return resp

    def fetch(self, start_date: dt.date, end_date: dt.date) -> List[Order]:
        url: Optional[str] = f"{self.config.base_url}/orders.json"
        params: Optional[Dict[str, Any]] = self._params(start_date, end_date)
        orders: List[Order] = []
        pages = 0

        while url:
            resp = self._get(url, params)
            pages += 1
            try:
                payload = resp.json()
            except ValueError as e:
                raise OrderSourceError(f"Shopify returned a non-JSON body: {e}") from e

            for raw in payload.get("orders", []):
                try:
                    orders.append(Order.model_validate(raw))
                except ValidationError as e:
                    raise OrderSourceError(f"Unexpected order payload (id={raw.get('id')}): {e}") from e

            # cursor pagination: the next URL already carries every query parameter
            url = resp.links.get("next", {}).get("url")
            params = None

        logger.info("Fetched %d Shopify orders in %d page(s) for %s..%s", len(orders), pages, start_date, end_date)
        return orders
