"""Per-role summarization settings.

Each role gets its own summary of every uploaded document. The tuple order of
``ROLE_CODES`` is the order in which summaries are generated.
"""

from dataclasses import dataclass

DEFAULT_MODEL = "facebook/bart-large-cnn"


@dataclass(frozen=True)
class RoleSummaryConfig:
    """Model, instruction and output length used to summarize for one role."""

    model: str
    prompt: str
    max_length: int


ROLE_CONFIGS: dict[str, RoleSummaryConfig] = {
    "STATION_CTRL": RoleSummaryConfig(
        model=DEFAULT_MODEL,
        prompt=(
            "Summarize this document focusing on operational impacts, safety concerns, "
            "immediate actions required, and timeline. Highlight any incidents, delays, "
            "or emergency protocols."
        ),
        max_length=200,
    ),
    "ROLLING_STOCK": RoleSummaryConfig(
        model=DEFAULT_MODEL,
        prompt=(
            "Summarize focusing on technical details, maintenance requirements, equipment "
            "status, spare parts needs, and engineering implications."
        ),
        max_length=250,
    ),
    "PROCUREMENT": RoleSummaryConfig(
        model=DEFAULT_MODEL,
        prompt=(
            "Summarize focusing on financial implications, contract terms, vendor details, "
            "budget impact, deadlines, and compliance requirements."
        ),
        max_length=200,
    ),
    "HR": RoleSummaryConfig(
        model=DEFAULT_MODEL,
        prompt=(
            "Summarize focusing on personnel impacts, training requirements, policy changes, "
            "staff allocation, and compliance with HR regulations."
        ),
        max_length=200,
    ),
    "SAFETY": RoleSummaryConfig(
        model=DEFAULT_MODEL,
        prompt=(
            "Summarize focusing on safety implications, regulatory compliance, risk "
            "assessment, corrective actions, and deadline requirements."
        ),
        max_length=250,
    ),
    "EXECUTIVE": RoleSummaryConfig(
        model=DEFAULT_MODEL,
        prompt=(
            "Provide executive summary focusing on strategic impact, cross-departmental "
            "implications, risks, financial impact, and key decisions required."
        ),
        max_length=300,
    ),
}

ROLE_CODES: tuple[str, ...] = tuple(ROLE_CONFIGS)


def get_role_config(role_code: str) -> RoleSummaryConfig:
    """Return the config for ``role_code``.

    Raises:
        ValueError: if the role is unknown.
    """
    config = ROLE_CONFIGS.get(role_code)
    if config is None:
        raise ValueError(f"Unknown role '{role_code}'. Choose from: {list(ROLE_CODES)}")
    return config
