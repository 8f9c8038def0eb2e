"""Keyword heuristics that turn a summary into triage signals.

Key points and action items come from regex matches over the summary.
Priority is additive over the summary only; severity is the highest tier
triggered anywhere in the summary or the original text.
"""

import re
from typing import ClassVar

from app.summarization.models import PostProcessedSummary

MAX_KEY_POINTS = 5
MAX_ACTION_ITEMS = 3
MIN_PRIORITY = 1
MAX_PRIORITY = 10

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


class PostProcessor:
    """Derives key points, action items, priority and severity."""

    _BULLET_RE: ClassVar[re.Pattern[str]] = re.compile(r"[•\-*]\s*([^•\-*\n]+)")
    _NUMBERED_RE: ClassVar[re.Pattern[str]] = re.compile(r"\d+\.\s*([^\d\n]+)")
    _ACTION_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(must|should|need to|required to|action:|todo:|follow up:)\s*([^.!?\n]+)",
        re.IGNORECASE,
    )

    KEY_POINT_KEYWORDS: ClassVar[tuple[str, ...]] = (
        "important", "critical", "urgent", "required", "must", "should", "deadline",
    )
    ACTION_VERBS: ClassVar[tuple[str, ...]] = (
        "implement", "review", "update", "complete", "submit", "approve", "schedule", "contact",
    )
    HIGH_PRIORITY_WORDS: ClassVar[tuple[str, ...]] = (
        "urgent", "critical", "emergency", "immediate", "asap",
    )
    MEDIUM_PRIORITY_WORDS: ClassVar[tuple[str, ...]] = (
        "important", "priority", "deadline", "required",
    )
    # role code -> (trigger word, bonus)
    ROLE_PRIORITY_BONUSES: ClassVar[dict[str, tuple[str, int]]] = {
        "STATION_CTRL": ("incident", 2),
        "SAFETY": ("safety", 2),
        "EXECUTIVE": ("risk", 1),
    }
    # highest tier first
    SEVERITY_TIERS: ClassVar[tuple[tuple[int, tuple[str, ...]], ...]] = (
        (5, ("critical", "severe", "major", "emergency")),
        (4, ("high", "significant", "important", "urgent")),
        (3, ("moderate", "medium", "notable")),
    )

    def process(self, summary: str, content: str, role_code: str) -> PostProcessedSummary:
        return PostProcessedSummary(
            key_points=self.extract_key_points(summary),
            action_items=self.extract_action_items(summary),
            priority_score=self.priority_score(summary, role_code),
            severity=self.severity(summary, content),
        )

    def extract_key_points(self, summary: str) -> list[str]:
        points = [m.group(1).strip() for m in self._BULLET_RE.finditer(summary)]
        points += [m.group(1).strip() for m in self._NUMBERED_RE.finditer(summary)]
        if not points:
            points = [
                sentence.strip()
                for sentence in _SENTENCE_SPLIT_RE.split(summary)
                if any(keyword in sentence.lower() for keyword in self.KEY_POINT_KEYWORDS)
            ]
        return points[:MAX_KEY_POINTS]

    def extract_action_items(self, summary: str) -> list[str]:
        items = [m.group(2).strip() for m in self._ACTION_RE.finditer(summary)]
        for sentence in _SENTENCE_SPLIT_RE.split(summary):
            trimmed = sentence.strip()
            if trimmed.lower().startswith(self.ACTION_VERBS):
                items.append(trimmed)
        return items[:MAX_ACTION_ITEMS]

    def priority_score(self, summary: str, role_code: str) -> int:
        lowered = summary.lower()
        score = MIN_PRIORITY
        score += 3 * sum(1 for word in self.HIGH_PRIORITY_WORDS if word in lowered)
        score += 2 * sum(1 for word in self.MEDIUM_PRIORITY_WORDS if word in lowered)
        bonus = self.ROLE_PRIORITY_BONUSES.get(role_code)
        if bonus is not None and bonus[0] in lowered:
            score += bonus[1]
        return max(MIN_PRIORITY, min(MAX_PRIORITY, score))

    def severity(self, summary: str, content: str) -> int:
        lowered = f"{summary} {content}".lower()
        for tier, words in self.SEVERITY_TIERS:
            if any(word in lowered for word in words):
                return tier
        return 1
