from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Tuple

DataPoint = Tuple[str, float]


class ChartSeries(BaseModel):
    """One stacked-chart series: `data` holds (category, value) pairs."""
    model_config = ConfigDict(frozen=True)

    name: str
    data: List[DataPoint]


class Metrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Revenue
    total_revenue: float
    average_revenue: float
    daily_revenue: Dict[str, float]

    # Countries & currencies
    currencies: Dict[str, int]
    sales_per_country: Dict[str, int]
    revenue_per_country: List[ChartSeries]

    # Products & prices
    products: Dict[str, int]
    revenue_per_product: Dict[str, float]
    prices: Dict[str, int]
    revenue_per_price_point: Dict[str, float]

    # Customers
    customer_sales: List[ChartSeries]

    # Referrals
    referring_sites: Dict[str, int]
    referring_pages: Dict[str, int]
    revenue_per_referral_site: Dict[str, float]
    revenue_per_referral_page: Dict[str, float]
