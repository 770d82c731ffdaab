# backend/shopify_dashboard/config.py
import os
from typing import Literal, Optional
from pydantic import BaseModel, Field

from shopify_dashboard.errors import ConfigError

SourceKind = Literal["shopify", "local"]

HELP = (
    "Set environment variables before starting the server, e.g. "
    'SHP_KEY="<shop_key>" SHP_PWD="<shop_password>" SHP_NAME="<shop_name>" '
    "uvicorn shopify_dashboard.main:app"
)


class ShopConfig(BaseModel):
    """Credentials and transport settings for the Shopify Admin API."""
    api_key: str
    password: str
    shop_name: str
    api_version: str = "2024-01"
    timeout: float = Field(30.0, gt=0)

    @property
    def base_url(self) -> str:
        return f"https://{self.shop_name}.myshopify.com/admin/api/{self.api_version}"

    @classmethod
    def from_env(cls) -> "ShopConfig":
        api_key = os.getenv("SHP_KEY")
        password = os.getenv("SHP_PWD")
        shop_name = os.getenv("SHP_NAME")
        if not (api_key and password and shop_name):
            raise ConfigError(HELP)
        return cls(
            api_key=api_key,
            password=password,
            shop_name=shop_name,
            api_version=os.getenv("SHP_API_VERSION", "2024-01"),
            timeout=float(os.getenv("SHP_TIMEOUT", "30")),
        )


def order_source_kind(value: Optional[str] = None) -> SourceKind:
    kind = (value or os.getenv("ORDER_SOURCE", "shopify")).strip().lower()
    if kind not in ("shopify", "local"):
        raise ConfigError(f"ORDER_SOURCE must be 'shopify' or 'local', got {kind!r}")
    return kind  # type: ignore[return-value]
