"""GeoJSON export utilities for the customer map."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ...models.domain import Customer, SegmentationConfig
from ..geospatial import bounding_box


def customer_to_feature(customer: Customer) -> Dict[str, Any]:
    """Convert a customer into a GeoJSON Point feature (lon, lat order)."""
    return {
        "type": "Feature",
        "id": customer.id,
        "geometry": {
            "type": "Point",
            "coordinates": [customer.longitude, customer.latitude],
        },
        "properties": {
            "id": customer.id,
            "businessName": customer.business_name,
            "contactName": customer.contact_name,
            "phone": customer.phone,
            "averageBags": customer.average_bags,
        },
    }


def export_customers_geojson(customers: Sequence[Customer]) -> Dict[str, Any]:
    features: List[Dict[str, Any]] = [customer_to_feature(customer) for customer in customers]
    return {"type": "FeatureCollection", "features": features}


def compute_map_bounds(customers: Sequence[Customer]) -> Optional[tuple[float, float, float, float]]:
    """Return (south, west, north, east) fitting every customer marker."""
    return bounding_box([(customer.latitude, customer.longitude) for customer in customers])


def build_map_view(customers: Sequence[Customer], config: SegmentationConfig) -> Dict[str, Any]:
    """Markers plus the viewport: fitted bounds, or the HQ when there are no customers."""
    bounds = compute_map_bounds(customers)
    if bounds is None:
        center = [config.hq_latitude, config.hq_longitude]
    else:
        south, west, north, east = bounds
        center = [(south + north) / 2, (west + east) / 2]

    return {
        "center": center,
        "bounds": list(bounds) if bounds is not None else None,
        "customers": export_customers_geojson(customers),
    }
