"""Data access helpers for loading customer records from Supabase."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ..config import settings
from ..db.supabase import get_supabase_client
from ..models.domain import Customer

logger = logging.getLogger(__name__)


class CustomerStoreError(RuntimeError):
    """Raised when the customer store is unavailable or a query fails."""


class CustomerStoreNotConfigured(CustomerStoreError):
    """Raised when no Supabase credentials are configured."""


class CustomerSource(Protocol):
    def list_customers(self) -> Sequence[Customer]:
        ...


def _coerce_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).replace(",", ""))
    except ValueError as exc:
        raise ValueError(f"Unable to parse float from value '{value}'") from exc


def _coerce_int(value: Any) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Unable to parse integer from value '{value}'")
    try:
        return int(float(str(value).replace(",", "")))
    except ValueError as exc:
        raise ValueError(f"Unable to parse integer from value '{value}'") from exc


def _text(row: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = row.get(key)
        if value is not None:
            return str(value).strip()
    return ""


def row_to_customer(row: Mapping[str, Any]) -> Optional[Customer]:
    """Build a Customer from a store row; returns None when coordinates are incomplete.

    Accepts both the camelCase columns written by the web client and snake_case columns.
    """

    lat = _coerce_float(row.get("latitude"))
    lon = _coerce_float(row.get("longitude"))
    if lat is None or lon is None:
        return None  # ignore records without a full coordinate pair

    last_visit = row.get("lastVisit", row.get("last_visit"))
    return Customer(
        id=_text(row, "id"),
        business_name=_text(row, "businessName", "business_name"),
        contact_name=_text(row, "contactName", "contact_name"),
        phone=_text(row, "phone"),
        gps_address=_text(row, "gpsAddress", "gps_address"),
        latitude=lat,
        longitude=lon,
        average_bags=_coerce_int(row.get("averageBags", row.get("average_bags"))),
        last_visit=str(last_visit) if last_visit else None,
    )


def rows_to_customers(rows: Iterable[Mapping[str, Any]]) -> tuple[Customer, ...]:
    customers: list[Customer] = []
    for row in rows:
        try:
            customer = row_to_customer(row)
        except ValueError as exc:
            logger.warning("Skipping customer row %s: %s", row.get("id"), exc)
            continue
        if customer is None:
            logger.warning("Skipping customer row %s: missing coordinates", row.get("id"))
            continue
        customers.append(customer)
    return tuple(customers)


class SupabaseCustomerRepository:
    """Reads the customer table from Supabase."""

    def __init__(self, client: Client | None = None, table: str | None = None) -> None:
        self._client = client
        self.table = table or settings.customers_table

    @property
    def client(self) -> Client:
        client = self._client or get_supabase_client()
        if client is None:
            raise CustomerStoreNotConfigured(
                "Supabase not configured. Set SACHET_SUPABASE_URL and SACHET_SUPABASE_KEY environment variables."
            )
        return client

    def list_customers(self) -> tuple[Customer, ...]:
        client = self.client
        try:
            response = client.table(self.table).select("*").execute()
        except (APIError, httpx.HTTPError) as exc:
            raise CustomerStoreError(f"Failed to load customers: {exc}") from exc
        return rows_to_customers(response.data or [])
