"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings
from ...db.supabase import get_supabase_client

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database() -> dict:
    """Check Supabase configuration and whether the customers table answers."""
    supabase = get_supabase_client()
    if not supabase:
        return {
            "configured": False,
            "message": "Supabase not configured. Set SACHET_SUPABASE_URL and SACHET_SUPABASE_KEY environment variables.",
        }

    try:
        response = supabase.table(settings.customers_table).select("id", count="exact").limit(1).execute()
    except Exception as exc:
        return {
            "configured": True,
            "connected": False,
            "error": str(exc),
            "message": f"Database connection error: {exc}",
        }
    return {
        "configured": True,
        "connected": True,
        "customers_count": response.count,
        "message": f"Database connected. Table '{settings.customers_table}' is reachable.",
    }


@router.get("/health/ai", status_code=status.HTTP_200_OK)
def check_ai() -> dict:
    """Report whether a text generation model is configured for analysis."""
    configured = bool(settings.gemini_api_key)
    return {
        "configured": configured,
        "provider": "gemini" if configured else None,
        "model": settings.gemini_model if configured else None,
    }
