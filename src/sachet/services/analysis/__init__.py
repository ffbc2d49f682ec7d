"""Customer analysis services."""

from .client import GeminiClient, TextGenerationClient, get_text_client, reset_text_client
from .service import (
    ANALYSIS_PROMPT_TEMPLATE,
    FAILED_RESULT,
    NO_DATA_RESULT,
    analyze_customers,
    build_analysis_prompt,
    parse_analysis_response,
)

__all__ = [
    "ANALYSIS_PROMPT_TEMPLATE",
    "FAILED_RESULT",
    "NO_DATA_RESULT",
    "GeminiClient",
    "TextGenerationClient",
    "analyze_customers",
    "build_analysis_prompt",
    "get_text_client",
    "parse_analysis_response",
    "reset_text_client",
]
