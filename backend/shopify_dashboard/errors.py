# backend/shopify_dashboard/errors.py
"""Exceptions raised by the report pipeline."""


class DashboardError(Exception):
    """Base class for dashboard errors."""


class InvalidDateError(DashboardError, ValueError):
    """Report window bounds are not ISO dates, or start is after end."""


class MalformedURLError(DashboardError, ValueError):
    """A referring-site value has no parseable host."""


class OrderSourceError(DashboardError):
    """The order-data source could not return orders."""


class ConfigError(DashboardError):
    """Required settings are missing from the environment."""
