from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

from app.database.models import CategoryRecord, DocumentRecord
from app.fanout.orchestrator import FanoutReport
from app.ingestion.models import IncomingFile, TaskStage, Uploader, UploadTask

ProgressListener = Callable[[UploadTask], None]


@dataclass(slots=True)
class PipelineContext:
    task: UploadTask
    upload: IncomingFile
    uploader: Uploader
    on_progress: ProgressListener | None = None
    extracted_text: str = ""
    bucket: str = ""
    storage_path: str = ""
    file_url: str = ""
    category: CategoryRecord | None = None
    document: DocumentRecord | None = None
    fanout_report: FanoutReport | None = None
    notified_count: int = 0

    def advance(self, progress: int, stage: TaskStage | None = None) -> None:
        self.task.advance(progress, stage)
        self.report()

    def report(self) -> None:
        if self.on_progress is not None:
            self.on_progress(self.task)


class PipelineStep(ABC):
    # best-effort steps may fail without failing the upload
    best_effort: ClassVar[bool] = False

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
