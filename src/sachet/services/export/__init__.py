"""Export services."""

from .geojson import (
    build_map_view,
    compute_map_bounds,
    customer_to_feature,
    export_customers_geojson,
)

__all__ = [
    "build_map_view",
    "compute_map_bounds",
    "customer_to_feature",
    "export_customers_geojson",
]
