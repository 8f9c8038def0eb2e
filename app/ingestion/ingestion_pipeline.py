"""Per-file ingestion state machine.

extract -> store binary -> save document row -> summarize for every role ->
notify. The first three steps decide whether the upload succeeds; the last
two only enrich a document that already exists and are never allowed to turn
a stored upload into an error.
"""

from app.config.settings import Settings
from app.database.repositories.categories_repository import CategoriesRepository
from app.database.repositories.documents_repository import DocumentsRepository
from app.database.repositories.notifications_repository import NotificationsRepository
from app.database.repositories.role_summaries_repository import RoleSummariesRepository
from app.database.repositories.user_roles_repository import UserRolesRepository
from app.extraction.factory import TextExtractorFactory
from app.fanout.orchestrator import FanoutOrchestrator
from app.ingestion.models import IncomingFile, Uploader, UploadTask
from app.ingestion.pipeline import PipelineContext, PipelineStep, ProgressListener
from app.ingestion.steps import (
    ExtractTextStep,
    NotifyStep,
    PersistDocumentStep,
    StoreBinaryStep,
    SummarizeStep,
)
from app.logging.logger import Log
from app.notifications.dispatcher import NotificationDispatcher
from app.storage.base import BaseObjectStorage
from app.storage.local_storage import LocalObjectStorage
from app.summarization.factory import SummarizerFactory
from app.summarization.post_processor import PostProcessor
from app.summarization.summarizer import Summarizer


class IngestionPipeline:
    """Runs the pipeline steps for one upload task."""

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(
        self,
        task: UploadTask,
        upload: IncomingFile,
        uploader: Uploader,
        on_progress: ProgressListener | None = None,
    ) -> UploadTask:
        """Drive ``task`` to a terminal status.

        Raises:
            Exception: whatever a required step raised, after the task has
                been marked as error.
        """
        context = PipelineContext(
            task=task,
            upload=upload,
            uploader=uploader,
            on_progress=on_progress,
        )
        Log.info(f"Processing upload {task.id}: {upload.name} ({upload.size} bytes)")
        task.start()
        context.report()

        for step in self._steps:
            if step.best_effort:
                context = self._run_best_effort(step, context)
                continue
            try:
                context = step.run(context)
            except Exception as exc:
                task.fail(str(exc))
                context.report()
                Log.error(f"Upload {task.id} failed at {type(step).__name__}: {exc}")
                raise

        task.complete()
        context.report()
        Log.info(f"Upload {task.id} completed as document {task.document_id}")
        return task

    @staticmethod
    def _run_best_effort(step: PipelineStep, context: PipelineContext) -> PipelineContext:
        try:
            return step.run(context)
        except Exception as exc:
            Log.warning(
                f"{type(step).__name__} failed for upload {context.task.id}, continuing: {exc}"
            )
            return context


def build_pipeline(
    settings: Settings,
    storage: BaseObjectStorage | None = None,
    summarizer: Summarizer | None = None,
) -> IngestionPipeline:
    """Build an IngestionPipeline with all required adapters.

    The caller owns ``summarizer`` when it passes one in and closes it.
    """
    if storage is None:
        storage = LocalObjectStorage(settings.storage_root, settings.storage_public_base_url)
    if summarizer is None:
        summarizer = SummarizerFactory.create(settings)
    documents_repo = DocumentsRepository()
    fanout = FanoutOrchestrator(
        summarizer=summarizer,
        post_processor=PostProcessor(),
        summaries_repo=RoleSummariesRepository(),
        documents_repo=documents_repo,
    )
    dispatcher = NotificationDispatcher(
        user_roles_repo=UserRolesRepository(),
        notifications_repo=NotificationsRepository(),
    )
    steps: list[PipelineStep] = [
        ExtractTextStep(TextExtractorFactory.create(settings)),
        StoreBinaryStep(storage),
        PersistDocumentStep(CategoriesRepository(), documents_repo, storage),
        SummarizeStep(fanout),
        NotifyStep(dispatcher),
    ]
    return IngestionPipeline(steps)
