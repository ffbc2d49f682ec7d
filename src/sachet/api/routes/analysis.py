"""AI analysis endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool

from ...data.customers_repository import CustomerSource
from ...models.domain import SegmentationConfig
from ...schemas.analysis import AnalysisResponse
from ...services.analysis import TextGenerationClient, analyze_customers
from ..dependencies import get_analysis_client, get_customer_source, get_segmentation_config
from .customers import load_customer_snapshot

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post("", response_model=AnalysisResponse, status_code=status.HTTP_200_OK)
async def run_analysis(
    source: CustomerSource = Depends(get_customer_source),
    client: TextGenerationClient = Depends(get_analysis_client),
    config: SegmentationConfig = Depends(get_segmentation_config),
) -> AnalysisResponse:
    customers = await run_in_threadpool(load_customer_snapshot, source)
    result = await analyze_customers(customers, client, config=config)
    return AnalysisResponse.from_domain(result)
