# backend/tests/conftest.py
import os, sys, pathlib, pytest
from fastapi.testclient import TestClient

BACKEND_DIR = pathlib.Path(__file__).resolve().parents[1]   # .../backend

# Make `from shopify_dashboard.*` importable
sys.path.insert(0, str(BACKEND_DIR))

# Never auto-create the demo database from the app under test
os.environ.setdefault("AUTO_BOOTSTRAP_DB", "0")

from shopify_dashboard.schemas.orders import Order  # noqa: E402


def order(
    created_at="2024-01-01T10:00:00-05:00",
    total_price="10.00",
    line_items=(("Widget", "5.00"),),
    currency="USD",
    country="US",
    referring_site="",
    customer_id=1,
    id=None,
) -> Order:
    """Build an Order the way the Admin API would send it."""
    return Order.model_validate({
        "id": id,
        "created_at": created_at,
        "total_price": total_price,
        "currency": currency,
        "billing_address": {"country": country} if country is not None else None,
        "referring_site": referring_site,
        "customer": {"id": customer_id} if customer_id is not None else None,
        "line_items": [{"title": t, "price": p} for t, p in line_items],
    })


class StaticOrderSource:
    def __init__(self, orders=()):
        self.orders = list(orders)
        self.calls = []

    def fetch(self, start_date, end_date):
        self.calls.append((start_date, end_date))
        return list(self.orders)

    def close(self):
        pass


@pytest.fixture()
def make_order():
    return order


@pytest.fixture()
def order_source():
    return StaticOrderSource()


@pytest.fixture()
def client(order_source):
    from shopify_dashboard.main import app
    from shopify_dashboard.api.report import get_order_source
    app.dependency_overrides[get_order_source] = lambda: order_source
    yield TestClient(app)
    app.dependency_overrides.clear()
