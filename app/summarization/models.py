from dataclasses import dataclass, field
from enum import Enum


class SummarySource(str, Enum):
    """Where a summary came from."""

    PROVIDER = "provider"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class SummaryResult:
    """Output of the summarizer for one role."""

    summary: str
    source: SummarySource


@dataclass(frozen=True)
class PostProcessedSummary:
    """Signals derived from a summary and the original text."""

    key_points: list[str] = field(default_factory=list)
    action_items: list[str] = field(default_factory=list)
    priority_score: int = 1
    severity: int = 1
