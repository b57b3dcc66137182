"""Data models for update_status pipeline stage."""

from dataclasses import dataclass, field

from classify_headlines.models import ReportedHeadline


@dataclass
class StatusRecord:
    """Contents of the persisted status file."""
    status: str
    tagline: str
    updated: str
    headlines: list[ReportedHeadline] = field(default_factory=list)
