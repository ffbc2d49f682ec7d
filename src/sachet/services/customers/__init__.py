"""Customer service helpers."""

from .segmentation import parse_timestamp, segment_customers
from .stats import compute_dashboard, summarize_customers, truncate_label

__all__ = [
    "compute_dashboard",
    "parse_timestamp",
    "segment_customers",
    "summarize_customers",
    "truncate_label",
]
