"""Shared dependencies for API routers."""

from __future__ import annotations

from fastapi import HTTPException, status

from ..config import settings
from ..data.customers_repository import CustomerSource, SupabaseCustomerRepository
from ..models.domain import SegmentationConfig
from ..services.analysis import TextGenerationClient, get_text_client


def get_customer_source() -> CustomerSource:
    return SupabaseCustomerRepository()


def get_segmentation_config() -> SegmentationConfig:
    return settings.segmentation_config()


def get_analysis_client() -> TextGenerationClient:
    try:
        return get_text_client()
    except RuntimeError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
