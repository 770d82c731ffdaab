# backend/shopify_dashboard/analytics/referrals.py
from typing import NamedTuple, Optional
from urllib.parse import urlsplit

from shopify_dashboard.errors import MalformedURLError

NO_REFERRER = "None"


class Referral(NamedTuple):
    page: str   # full referring URL
    site: str   # host only


def classify(referring_site: Optional[str]) -> Referral:
    """Map a referring URL to (page, site); missing or empty is direct traffic."""
    if not referring_site:
        return Referral(NO_REFERRER, NO_REFERRER)
    try:
        host = urlsplit(referring_site).hostname
    except ValueError as e:
        raise MalformedURLError(f"cannot parse referring site {referring_site!r}: {e}") from e
    if not host:
        raise MalformedURLError(f"referring site {referring_site!r} has no host")
    return Referral(referring_site, host)
