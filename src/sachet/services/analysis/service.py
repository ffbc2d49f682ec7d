"""Customer-base analysis through an external text generation model."""

from __future__ import annotations

import asyncio
import dataclasses
import json
import logging
from datetime import datetime
from typing import Optional, Sequence

from pydantic import ValidationError

from ...models.domain import AnalysisResult, Customer, SegmentationConfig, SegmentCounts
from ...schemas.analysis import AnalysisPayload
from ..customers.segmentation import segment_customers
from .client import TextGenerationClient

logger = logging.getLogger(__name__)

NO_DATA_RESULT = AnalysisResult(
    summary="No data available to analyze.",
    strategy="Start collecting customer data to generate insights.",
    clusters=[],
    source="no_data",
)

FAILED_RESULT = AnalysisResult(
    summary="Analysis currently unavailable.",
    strategy="Please check your network connection or API key.",
    clusters=["Analysis failed"],
    source="failed",
)

ANALYSIS_PROMPT_TEMPLATE = """
Analyze this sachet water customer data in Ghana.

Segmentation Context:
- High Volume Customers (>{high_volume_threshold} bags): {high_volume}
- Local Customers (<{local_radius_km:g}km from {hq_label}): {local}
- New Customers (last {new_customer_window_days} days): {new}

Detailed Data: {records}

Provide a JSON response with the following fields:
- summary: A brief executive summary of the customer base, mentioning the segments.
- strategy: Suggest a sales or delivery strategy based on the segmentation (e.g. how to retain high volume, or expand local routes).
- clusters: An array of strings, where each string describes a suggested delivery cluster/zone based on location and volume.
Respond with the JSON object only.
"""


def _fresh(result: AnalysisResult) -> AnalysisResult:
    """Copy a shared fallback so callers never mutate the module-level one."""

    return dataclasses.replace(result, clusters=list(result.clusters))


def reduce_customer(customer: Customer) -> dict:
    """Strip a customer down to what the model needs, with coarsened coordinates."""

    return {
        "name": customer.business_name,
        "loc": f"{customer.latitude:.3f},{customer.longitude:.3f}",
        "vol": customer.average_bags,
    }


def build_analysis_prompt(
    customers: Sequence[Customer],
    segments: SegmentCounts,
    config: SegmentationConfig,
    template: str = ANALYSIS_PROMPT_TEMPLATE,
) -> str:
    records = json.dumps([reduce_customer(customer) for customer in customers], ensure_ascii=False)
    return template.format(
        high_volume=segments.high_volume,
        local=segments.local,
        new=segments.new,
        high_volume_threshold=config.high_volume_threshold,
        local_radius_km=config.local_radius_km,
        new_customer_window_days=config.new_customer_window_days,
        hq_label=config.hq_label,
        records=records,
    )


def _strip_code_fence(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```"):
        stripped = stripped.split("\n", 1)[1] if "\n" in stripped else ""
        if stripped.rstrip().endswith("```"):
            stripped = stripped.rstrip()[:-3]
    return stripped.strip()


def parse_analysis_response(text: str) -> AnalysisResult:
    """Parse the model's JSON answer; raises ValueError when it does not fit."""

    if not text or not text.strip():
        raise ValueError("No response from text generation model")
    try:
        payload = AnalysisPayload.model_validate_json(_strip_code_fence(text))
    except ValidationError as exc:
        raise ValueError(f"Unexpected analysis response: {exc.error_count()} validation error(s)") from exc
    return AnalysisResult(
        summary=payload.summary,
        strategy=payload.strategy,
        clusters=list(payload.clusters),
    )


async def analyze_customers(
    customers: Sequence[Customer],
    client: TextGenerationClient,
    segments: Optional[SegmentCounts] = None,
    *,
    config: Optional[SegmentationConfig] = None,
    template: str = ANALYSIS_PROMPT_TEMPLATE,
    now: Optional[datetime] = None,
) -> AnalysisResult:
    """Ask the model to summarize the customer base.

    Always resolves to an ``AnalysisResult``: an empty customer list returns
    the no-data result without calling the model, and any failure of the call
    or of parsing its answer returns the failed result.
    """

    if not customers:
        return _fresh(NO_DATA_RESULT)

    config = config or SegmentationConfig()
    try:
        if segments is None:
            segments = segment_customers(customers, config, now)
        prompt = build_analysis_prompt(customers, segments, config, template)
        text = await asyncio.to_thread(client.generate, prompt)
        result = parse_analysis_response(text)
    except Exception:
        logger.exception("Customer analysis failed for %d customers", len(customers))
        return _fresh(FAILED_RESULT)

    logger.info("Customer analysis completed with %d suggested clusters", len(result.clusters))
    return result
