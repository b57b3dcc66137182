"""Error types raised by the status update pipeline."""

from __future__ import annotations


class StatusUpdateError(Exception):
    """Base class for all status update errors."""


class ConfigError(StatusUpdateError):
    """Required environment variables are missing."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required environment variables: {', '.join(missing)}")


class PipelineError(StatusUpdateError):
    """A fetch or classify stage failed. Triggers the fallback status."""


class FetchError(PipelineError):
    """News search API unavailable or returned no articles."""


class CallError(PipelineError):
    """Completion API request failed."""


class EmptyResponseError(PipelineError):
    """Completion API returned no usable text."""


class ParseError(PipelineError):
    """Model response is not valid JSON."""

    def __init__(self, raw_text: str) -> None:
        self.raw_text = raw_text
        super().__init__(f"Failed to parse model response as JSON: {raw_text}")


class ValidationError(PipelineError):
    """Parsed model response failed a field check."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field}: {message}")
