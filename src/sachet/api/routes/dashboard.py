"""Dashboard endpoints: summary cards, segments and the top customers chart."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...config import settings
from ...data.customers_repository import CustomerSource
from ...models.domain import SegmentationConfig
from ...schemas.customers import DashboardResponse, SegmentCountsModel
from ...services.customers import compute_dashboard, segment_customers
from ..dependencies import get_customer_source, get_segmentation_config
from .customers import load_customer_snapshot

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse, status_code=status.HTTP_200_OK)
def get_dashboard(
    source: CustomerSource = Depends(get_customer_source),
    config: SegmentationConfig = Depends(get_segmentation_config),
) -> DashboardResponse:
    customers = load_customer_snapshot(source)
    payload = compute_dashboard(
        customers,
        config,
        limit=settings.top_customers_limit,
        name_length=settings.display_name_length,
    )
    return DashboardResponse.model_validate(payload)


@router.get("/segments", response_model=SegmentCountsModel, status_code=status.HTTP_200_OK)
def get_segments(
    source: CustomerSource = Depends(get_customer_source),
    config: SegmentationConfig = Depends(get_segmentation_config),
) -> SegmentCountsModel:
    customers = load_customer_snapshot(source)
    return SegmentCountsModel.from_domain(segment_customers(customers, config))
