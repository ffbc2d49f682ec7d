"""Domain models for customer records and derived analytics."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True)
class Customer:
    """Represents a retail customer captured in the field with its GPS location."""

    id: str
    business_name: str
    contact_name: str
    phone: str
    gps_address: str
    latitude: float
    longitude: float
    average_bags: int
    last_visit: Optional[str]


@dataclass(frozen=True, slots=True)
class SegmentationConfig:
    """Reference point and thresholds used to segment the customer base."""

    hq_latitude: float = 5.6037
    hq_longitude: float = -0.1870
    hq_label: str = "Accra HQ"
    high_volume_threshold: int = 50
    local_radius_km: float = 5.0
    new_customer_window_days: int = 30


@dataclass(frozen=True, slots=True)
class SegmentCounts:
    """Overlapping cohort sizes; a customer may count in several segments."""

    high_volume: int = 0
    local: int = 0
    new: int = 0


@dataclass(frozen=True, slots=True)
class TopCustomer:
    id: str
    name: str
    bags: int


@dataclass(frozen=True, slots=True)
class CustomerSummary:
    total_customers: int
    total_bags: int
    avg_bags_per_customer: int
    top_by_volume: list[TopCustomer] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Outcome of a customer-base analysis, including fallback outcomes."""

    summary: str
    strategy: str
    clusters: list[str] = field(default_factory=list)
    source: str = "model"
