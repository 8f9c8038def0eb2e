from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class NewDocument:
    """Column values for a row about to be inserted into the documents table."""

    title: str
    content: str
    file_type: str
    file_size: int
    file_url: str
    user_id: str
    category_id: str | None
    metadata: dict[str, Any] = field(default_factory=dict)
    severity_level: int = 1
    status: str = "active"
    is_public: bool = False
    tags: list[str] = field(default_factory=list)


@dataclass
class DocumentRecord:
    """Represents a row from the documents table."""

    id: str
    title: str
    file_type: str
    file_size: int
    user_id: str
    category_id: str | None
    severity_level: int
    status: str
    content: str = ""
    file_url: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None


@dataclass(frozen=True)
class CategoryRecord:
    """Represents a row from the document_categories table."""

    id: str
    code: str
    name: str
    priority_level: int
    target_roles: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RoleSummaryRecord:
    """Represents a row from the document_summaries table."""

    document_id: str
    role_code: str
    summary_text: str
    key_points: list[str] = field(default_factory=list)
    action_items: list[str] = field(default_factory=list)
    priority_score: int = 1
    generated_at: datetime | None = None
