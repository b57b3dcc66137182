"""Classify headlines with the Anthropic Messages API."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

import requests

from classify_headlines.instructions import CLASSIFY_HEADLINES_INSTRUCTIONS
from classify_headlines.models import ALLOWED_STATUSES, ClassificationResult, ReportedHeadline
from common.config import DEFAULT_TIMEOUT
from common.errors import CallError, EmptyResponseError, ParseError, ValidationError
from common.utils import get_value
from fetch_headlines.models import Headline

logger = logging.getLogger(__name__)

ANTHROPIC_MESSAGES_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
DEFAULT_MODEL = "claude-sonnet-4-6"
MAX_TOKENS = 512

_LEADING_FENCE_RE = re.compile(r"^```json\s*", re.IGNORECASE)
_TRAILING_FENCE_RE = re.compile(r"\s*```$")


def _format_headlines_for_prompt(headlines: list[Headline]) -> str:
    """Format headlines as a numbered list with source and optional description."""
    entries = []
    for i, headline in enumerate(headlines, 1):
        entry = f"{i}. [{headline.source}] {headline.title}"
        if headline.description:
            entry += f"\n   {headline.description}"
        entries.append(entry)
    return "\n\n".join(entries)


def build_prompt(headlines: list[Headline]) -> str:
    """Embed the headlines in the classification instructions."""
    return CLASSIFY_HEADLINES_INSTRUCTIONS.format(
        headlines=_format_headlines_for_prompt(headlines)
    )


def call_model(
    prompt: str,
    api_key: str,
    model: str = DEFAULT_MODEL,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """
    Send a single-turn prompt to the Messages API and return the reply text.

    Raises:
        CallError: If the request fails or the response is not successful.
        EmptyResponseError: If the first content block has no text.
    """
    try:
        response = requests.post(
            ANTHROPIC_MESSAGES_URL,
            headers={
                "content-type": "application/json",
                "x-api-key": api_key,
                "anthropic-version": ANTHROPIC_VERSION,
            },
            json={
                "model": model,
                "max_tokens": MAX_TOKENS,
                "messages": [{"role": "user", "content": prompt}],
            },
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise CallError(f"Anthropic API request failed: {exc}") from exc

    if not response.ok:
        raise CallError(f"Anthropic API error {response.status_code}: {response.text}")

    try:
        data = response.json()
    except ValueError as exc:
        raise CallError(f"Anthropic API returned invalid JSON: {exc}") from exc

    content = get_value(data, "content")
    text = get_value(content[0], "text") if isinstance(content, list) and content else None
    if not isinstance(text, str) or not text.strip():
        raise EmptyResponseError("Empty response from model")

    return text.strip()


def strip_code_fence(text: str) -> str:
    """Remove a leading ```json fence and trailing ``` fence if present."""
    text = _LEADING_FENCE_RE.sub("", text)
    text = _TRAILING_FENCE_RE.sub("", text)
    return text.strip()


def parse_response(raw_text: str) -> Any:
    """Parse model output as JSON, tolerating surrounding code fences."""
    try:
        return json.loads(strip_code_fence(raw_text))
    except json.JSONDecodeError as exc:
        raise ParseError(raw_text) from exc


def validate_result(data: Any) -> ClassificationResult:
    """
    Check the parsed model output and build a ClassificationResult.

    Headline contents are taken as given; only the shape is checked.

    Raises:
        ValidationError: On the first failing field (status, tagline, headlines).
    """
    if not isinstance(data, dict):
        raise ValidationError("status", f"expected a JSON object, got {type(data).__name__}")

    status = data.get("status")
    if status not in ALLOWED_STATUSES:
        raise ValidationError("status", f"{status!r} is not one of {', '.join(ALLOWED_STATUSES)}")

    tagline = data.get("tagline")
    if not isinstance(tagline, str) or not tagline:
        raise ValidationError("tagline", "missing or empty")

    headlines = data.get("headlines")
    if not isinstance(headlines, list) or not headlines:
        raise ValidationError("headlines", "missing or empty")

    return ClassificationResult(
        status=status,
        tagline=tagline,
        headlines=[_to_reported_headline(h) for h in headlines],
    )


def _to_reported_headline(raw: Any) -> ReportedHeadline:
    if not isinstance(raw, dict):
        raw = {}
    return ReportedHeadline(
        title=raw.get("title") or "",
        url=raw.get("url") or "",
        source=raw.get("source") or "",
    )


def classify_headlines(
    headlines: list[Headline],
    api_key: str,
    model: str = DEFAULT_MODEL,
    timeout: float = DEFAULT_TIMEOUT,
) -> ClassificationResult:
    """
    Ask the model whether today's headlines show US-initiated armed conflict.

    Args:
        headlines: Non-empty list of Headlines
        api_key: Anthropic API key
        model: Model identifier
        timeout: Request timeout in seconds

    Returns:
        Validated ClassificationResult.

    Raises:
        ValidationError: If `headlines` is empty or the reply fails validation.
        CallError, EmptyResponseError, ParseError: See call_model/parse_response.
    """
    if not headlines:
        raise ValidationError("headlines", "no headlines to classify")

    prompt = build_prompt(headlines)

    logger.info("Sending %d headlines to %s for analysis", len(headlines), model)
    raw_text = call_model(prompt, api_key, model=model, timeout=timeout)
    logger.info("Model response: %s", raw_text)

    return validate_result(parse_response(raw_text))
