"""API route modules."""

from . import analysis, customers, dashboard, health

__all__ = ["analysis", "customers", "dashboard", "health"]
