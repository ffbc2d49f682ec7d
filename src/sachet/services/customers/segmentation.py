"""Customer segmentation by volume, distance from HQ and recency."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from ...models.domain import Customer, SegmentationConfig, SegmentCounts
from ..geospatial import haversine_km


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp, assuming UTC when no offset is given."""

    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_high_volume(customer: Customer, config: SegmentationConfig) -> bool:
    return customer.average_bags > config.high_volume_threshold


def is_local(customer: Customer, config: SegmentationConfig) -> bool:
    distance = haversine_km(customer.latitude, customer.longitude, config.hq_latitude, config.hq_longitude)
    return distance <= config.local_radius_km


def is_new(customer: Customer, cutoff: datetime) -> bool:
    visited = parse_timestamp(customer.last_visit)
    return visited is not None and visited >= cutoff


def new_customer_cutoff(config: SegmentationConfig, now: Optional[datetime] = None) -> datetime:
    """Start of the trailing window, subtracting calendar days from ``now``."""

    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    # Aware datetime arithmetic keeps the wall-clock time, i.e. calendar days.
    return current - timedelta(days=config.new_customer_window_days)


def segment_customers(
    customers: Iterable[Customer],
    config: Optional[SegmentationConfig] = None,
    now: Optional[datetime] = None,
) -> SegmentCounts:
    """Count customers in the high volume, local and new segments."""

    config = config or SegmentationConfig()
    cutoff = new_customer_cutoff(config, now)

    high_volume = local = new = 0
    for customer in customers:
        if is_high_volume(customer, config):
            high_volume += 1
        if is_local(customer, config):
            local += 1
        if is_new(customer, cutoff):
            new += 1
    return SegmentCounts(high_volume=high_volume, local=local, new=new)
