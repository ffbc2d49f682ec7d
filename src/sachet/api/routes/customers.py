"""Customer dataset endpoints."""

from __future__ import annotations

from typing import List, Sequence

from fastapi import APIRouter, Depends, HTTPException, status

from ...data.customers_repository import CustomerSource, CustomerStoreError, CustomerStoreNotConfigured
from ...models.domain import Customer, SegmentationConfig
from ...persistence.customers import build_new_customer, save_customer
from ...schemas.customers import CustomerCreateRequest, CustomerMapResponse, CustomerModel
from ...services.export import build_map_view
from ..dependencies import get_customer_source, get_segmentation_config

router = APIRouter(prefix="/customers", tags=["customers"])


def load_customer_snapshot(source: CustomerSource) -> Sequence[Customer]:
    """Read every customer, translating store failures into HTTP errors."""
    try:
        return source.list_customers()
    except CustomerStoreNotConfigured as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except CustomerStoreError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc


@router.get("", response_model=List[CustomerModel], status_code=status.HTTP_200_OK)
def list_customers(source: CustomerSource = Depends(get_customer_source)) -> List[CustomerModel]:
    return [CustomerModel.from_domain(customer) for customer in load_customer_snapshot(source)]


@router.post("", response_model=CustomerModel, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreateRequest) -> CustomerModel:
    customer = build_new_customer(payload)
    try:
        saved = save_customer(customer)
    except CustomerStoreNotConfigured as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except CustomerStoreError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return CustomerModel.from_domain(saved)


@router.get("/map", response_model=CustomerMapResponse, status_code=status.HTTP_200_OK)
def get_customer_map(
    source: CustomerSource = Depends(get_customer_source),
    config: SegmentationConfig = Depends(get_segmentation_config),
) -> CustomerMapResponse:
    customers = load_customer_snapshot(source)
    return CustomerMapResponse(**build_map_view(customers, config))
