from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union

# Shopify sends money as text ("19.99"); local fixtures may send numbers.
Amount = Union[str, float, None]


class LineItem(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    price: Amount = None


class BillingAddress(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    country: Optional[str] = None


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Union[int, str]


class Order(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Union[int, str, None] = None
    created_at: str                       # ISO timestamp in shop-local time
    total_price: Amount = None
    currency: Optional[str] = None
    billing_address: Optional[BillingAddress] = None
    referring_site: Optional[str] = None  # "" means direct traffic
    customer: Optional[Customer] = None
    line_items: List[LineItem] = []

    @property
    def country(self) -> Optional[str]:
        return self.billing_address.country if self.billing_address else None

    @property
    def customer_id(self) -> Optional[str]:
        return str(self.customer.id) if self.customer else None
