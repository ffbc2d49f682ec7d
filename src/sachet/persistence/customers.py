"""Customer database persistence."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError

from ..config import settings
from ..data.customers_repository import CustomerStoreError, CustomerStoreNotConfigured
from ..db.supabase import get_supabase_client
from ..models.domain import Customer
from ..schemas.customers import CustomerCreateRequest

logger = logging.getLogger(__name__)


def build_new_customer(payload: CustomerCreateRequest, now: Optional[datetime] = None) -> Customer:
    """Create a Customer from captured form data.

    lastVisit is stamped once here and is not updated by later orders.
    """
    stamp = now or datetime.now(timezone.utc)
    return Customer(
        id=str(uuid.uuid4()),
        business_name=payload.businessName,
        contact_name=payload.contactName,
        phone=payload.phone,
        gps_address=payload.gpsAddress,
        latitude=payload.latitude,
        longitude=payload.longitude,
        average_bags=payload.averageBags,
        last_visit=stamp.isoformat(),
    )


def customer_to_record(customer: Customer) -> dict[str, Any]:
    return {
        "id": customer.id,
        "businessName": customer.business_name,
        "contactName": customer.contact_name,
        "phone": customer.phone,
        "gpsAddress": customer.gps_address,
        "latitude": customer.latitude,
        "longitude": customer.longitude,
        "averageBags": customer.average_bags,
        "lastVisit": customer.last_visit,
    }


def save_customer(customer: Customer, client: Any = None, table: str | None = None) -> Customer:
    """Insert a customer into the store and return it."""
    supabase = client or get_supabase_client()
    if not supabase:
        raise CustomerStoreNotConfigured("Supabase not configured - customer cannot be saved")

    try:
        supabase.table(table or settings.customers_table).insert(customer_to_record(customer)).execute()
    except (APIError, httpx.HTTPError) as exc:
        raise CustomerStoreError(f"Failed to save customer {customer.id}: {exc}") from exc

    logger.info("Saved customer %s (%s)", customer.id, customer.business_name)
    return customer
