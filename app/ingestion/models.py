import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from app.ingestion.exceptions import InvalidTaskTransitionError


class TaskStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class TaskStage(str, Enum):
    EXTRACTING = "extracting"
    UPLOADING = "uploading"
    PERSISTING = "persisting"
    SUMMARIZING = "summarizing"


ACCEPTED_PROGRESS = 10


@dataclass(frozen=True)
class IncomingFile:
    """A file handed to the worker for ingestion."""

    name: str
    media_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: Path, media_type: str) -> "IncomingFile":
        return cls(name=path.name, media_type=media_type, data=path.read_bytes())


@dataclass(frozen=True)
class Uploader:
    """The user submitting a file and the role they upload under."""

    user_id: str
    role_code: str
    category_code: str | None = None


@dataclass
class UploadTask:
    """Progress of one file through the ingestion pipeline.

    Status only moves forward: pending -> processing -> completed | error.
    Progress never goes down.
    """

    file_name: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    status: TaskStatus = TaskStatus.PENDING
    stage: TaskStage | None = None
    progress: int = 0
    error: str | None = None
    document_id: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (TaskStatus.COMPLETED, TaskStatus.ERROR)

    def start(self) -> None:
        if self.status is not TaskStatus.PENDING:
            raise InvalidTaskTransitionError(
                f"Task {self.id} cannot start from status '{self.status.value}'"
            )
        self.status = TaskStatus.PROCESSING
        self.progress = max(self.progress, ACCEPTED_PROGRESS)

    def advance(self, progress: int, stage: TaskStage | None = None) -> None:
        if self.status is not TaskStatus.PROCESSING:
            raise InvalidTaskTransitionError(
                f"Task {self.id} cannot advance from status '{self.status.value}'"
            )
        self.progress = max(self.progress, min(progress, 100))
        if stage is not None:
            self.stage = stage

    def complete(self) -> None:
        if self.status is not TaskStatus.PROCESSING:
            raise InvalidTaskTransitionError(
                f"Task {self.id} cannot complete from status '{self.status.value}'"
            )
        self.status = TaskStatus.COMPLETED
        self.stage = None
        self.progress = 100

    def fail(self, message: str) -> None:
        if self.is_terminal:
            raise InvalidTaskTransitionError(
                f"Task {self.id} is already {self.status.value}"
            )
        self.status = TaskStatus.ERROR
        self.error = message
