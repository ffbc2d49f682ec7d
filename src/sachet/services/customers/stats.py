"""Customer analytics helpers."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Optional, Sequence

from ...models.domain import Customer, CustomerSummary, SegmentationConfig, TopCustomer
from ...schemas.customers import SegmentCountsModel
from .segmentation import segment_customers

ELLIPSIS = "..."


def truncate_label(name: str, max_length: int = 10) -> str:
    """Shorten a display name, appending an ellipsis when it is cut."""

    if len(name) > max_length:
        return name[:max_length] + ELLIPSIS
    return name


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def summarize_customers(
    customers: Sequence[Customer],
    limit: int = 5,
    name_length: int = 10,
) -> CustomerSummary:
    total_customers = len(customers)
    total_bags = sum(customer.average_bags for customer in customers)
    avg_bags = round_half_up(total_bags / total_customers) if total_customers else 0

    # sorted() is stable, so ties keep their original order.
    ranked = sorted(customers, key=lambda customer: customer.average_bags, reverse=True)
    top = [
        TopCustomer(
            id=customer.id,
            name=truncate_label(customer.business_name, name_length),
            bags=customer.average_bags,
        )
        for customer in ranked[: max(limit, 0)]
    ]

    return CustomerSummary(
        total_customers=total_customers,
        total_bags=total_bags,
        avg_bags_per_customer=avg_bags,
        top_by_volume=top,
    )


def compute_dashboard(
    customers: Sequence[Customer],
    config: Optional[SegmentationConfig] = None,
    now: Optional[datetime] = None,
    *,
    limit: int = 5,
    name_length: int = 10,
) -> dict:
    """Assemble the summary cards, segment counts and top customers chart."""

    config = config or SegmentationConfig()
    summary = summarize_customers(customers, limit=limit, name_length=name_length)
    segments = segment_customers(customers, config, now)

    return {
        "totalCustomers": summary.total_customers,
        "totalBags": summary.total_bags,
        "avgBagsPerCustomer": summary.avg_bags_per_customer,
        "segments": SegmentCountsModel.from_domain(segments).model_dump(),
        "topCustomers": [
            {"id": entry.id, "name": entry.name, "bags": entry.bags}
            for entry in summary.top_by_volume
        ],
        "thresholds": {
            "highVolumeBags": config.high_volume_threshold,
            "localRadiusKm": config.local_radius_km,
            "newCustomerDays": config.new_customer_window_days,
            "hqLabel": config.hq_label,
        },
    }
