"""Data models for classify_headlines pipeline stage."""

from dataclasses import dataclass, field

ALLOWED_STATUSES = ("no", "unclear", "yes")


@dataclass
class ReportedHeadline:
    """Headline selected by the model to support its judgment."""
    title: str
    url: str
    source: str


@dataclass
class ClassificationResult:
    """Validated model judgment for the day's headlines."""
    status: str
    tagline: str
    headlines: list[ReportedHeadline] = field(default_factory=list)
