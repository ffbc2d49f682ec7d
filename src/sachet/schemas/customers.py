"""Customer-facing API schemas."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.domain import Customer, SegmentCounts


class CustomerModel(BaseModel):
    id: str
    businessName: str
    contactName: str
    phone: str
    gpsAddress: str
    latitude: float
    longitude: float
    averageBags: int
    lastVisit: str | None = None

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerModel":
        return cls(
            id=customer.id,
            businessName=customer.business_name,
            contactName=customer.contact_name,
            phone=customer.phone,
            gpsAddress=customer.gps_address,
            latitude=customer.latitude,
            longitude=customer.longitude,
            averageBags=customer.average_bags,
            lastVisit=customer.last_visit,
        )


class CustomerCreateRequest(BaseModel):
    """Fields captured by the field agent; id and lastVisit are assigned on save."""

    model_config = ConfigDict(str_strip_whitespace=True)

    businessName: str = Field(..., min_length=1)
    contactName: str = ""
    phone: str = Field(..., min_length=1)
    gpsAddress: str = ""
    latitude: float
    longitude: float
    averageBags: int = Field(default=0, ge=0)

    @field_validator("averageBags", mode="before")
    @classmethod
    def _blank_bags_as_zero(cls, value: Any) -> Any:
        if value is None or value == "":
            return 0
        return value


class SegmentCountsModel(BaseModel):
    highVolume: int
    local: int
    new: int

    @classmethod
    def from_domain(cls, counts: SegmentCounts) -> "SegmentCountsModel":
        return cls(highVolume=counts.high_volume, local=counts.local, new=counts.new)


class TopCustomerModel(BaseModel):
    id: str
    name: str
    bags: int


class ThresholdsModel(BaseModel):
    highVolumeBags: int
    localRadiusKm: float
    newCustomerDays: int
    hqLabel: str


class DashboardResponse(BaseModel):
    totalCustomers: int
    totalBags: int
    avgBagsPerCustomer: int
    segments: SegmentCountsModel
    topCustomers: List[TopCustomerModel]
    thresholds: ThresholdsModel


class CustomerMapResponse(BaseModel):
    center: List[float]
    bounds: Optional[List[float]] = None
    customers: dict
