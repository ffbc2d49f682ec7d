"""Customer analysis API schemas."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict

from ..models.domain import AnalysisResult


class AnalysisPayload(BaseModel):
    """Shape the text generation model is asked to return."""

    model_config = ConfigDict(extra="ignore")

    summary: str
    strategy: str
    clusters: List[str]


class AnalysisResponse(AnalysisPayload):
    source: Literal["model", "no_data", "failed"] = "model"

    @classmethod
    def from_domain(cls, result: AnalysisResult) -> "AnalysisResponse":
        return cls(
            summary=result.summary,
            strategy=result.strategy,
            clusters=list(result.clusters),
            source=result.source,
        )
