from app.database.models import CategoryRecord, NewDocument
from app.database.repositories.categories_repository import CategoriesRepository
from app.database.repositories.documents_repository import DocumentsRepository
from app.extraction.factory import TextExtractorFactory
from app.fanout.orchestrator import FanoutOrchestrator
from app.ingestion.categories import resolve_category_code
from app.ingestion.exceptions import PersistenceError, StorageError
from app.ingestion.models import TaskStage
from app.ingestion.pipeline import PipelineContext, PipelineStep
from app.ingestion.storage_paths import (
    bucket_for_media_type,
    build_storage_path,
    file_type_for_media_type,
)
from app.logging.logger import Log
from app.notifications.dispatcher import NotificationDispatcher
from app.storage.base import BaseObjectStorage


class ExtractTextStep(PipelineStep):
    def __init__(self, extractors: TextExtractorFactory) -> None:
        self._extractors = extractors

    def run(self, context: PipelineContext) -> PipelineContext:
        context.advance(30, TaskStage.EXTRACTING)
        extractor = self._extractors.for_media_type(context.upload.media_type)
        context.extracted_text = extractor.extract(context.upload.data, context.upload.name)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {context.upload.name} "
            f"(task {context.task.id})"
        )
        context.advance(50)
        return context


class StoreBinaryStep(PipelineStep):
    def __init__(self, storage: BaseObjectStorage) -> None:
        self._storage = storage

    def run(self, context: PipelineContext) -> PipelineContext:
        context.advance(50, TaskStage.UPLOADING)
        upload = context.upload
        context.bucket = bucket_for_media_type(upload.media_type)
        context.storage_path = build_storage_path(
            context.uploader.user_id, upload.name, upload.media_type
        )
        try:
            self._storage.put(context.bucket, context.storage_path, upload.data)
        except StorageError:
            raise
        except Exception as exc:
            raise StorageError(f"Storage upload failed: {exc}") from exc
        context.file_url = self._storage.public_url(context.bucket, context.storage_path)
        Log.info(f"Stored {upload.size} bytes at {context.bucket}/{context.storage_path}")
        context.advance(70)
        return context


class PersistDocumentStep(PipelineStep):
    """Writes the document row, removing the stored binary if the write fails."""

    def __init__(
        self,
        categories_repo: CategoriesRepository,
        documents_repo: DocumentsRepository,
        storage: BaseObjectStorage,
    ) -> None:
        self._categories_repo = categories_repo
        self._documents_repo = documents_repo
        self._storage = storage

    def run(self, context: PipelineContext) -> PipelineContext:
        context.advance(70, TaskStage.PERSISTING)
        context.category = self._resolve_category(context)
        try:
            document = self._documents_repo.insert(self._build_document(context))
        except Exception as exc:
            self._discard_binary(context)
            raise PersistenceError(f"Database save failed: {exc}") from exc

        context.document = document
        context.task.document_id = document.id
        Log.info(f"Saved document {document.id} for {context.upload.name}")
        context.advance(85)
        return context

    def _resolve_category(self, context: PipelineContext) -> CategoryRecord | None:
        uploader = context.uploader
        code = resolve_category_code(uploader.role_code, uploader.category_code)
        if code is None:
            return None
        try:
            category = self._categories_repo.find_by_code(code)
        except Exception as exc:
            Log.warning(f"Category lookup for '{code}' failed, saving without category: {exc}")
            return None
        if category is None:
            Log.warning(f"Category '{code}' not found, saving without category")
        return category

    @staticmethod
    def _build_document(context: PipelineContext) -> NewDocument:
        upload = context.upload
        category = context.category
        return NewDocument(
            title=upload.name,
            content=context.extracted_text,
            file_type=file_type_for_media_type(upload.media_type),
            file_size=upload.size,
            file_url=context.file_url,
            user_id=context.uploader.user_id,
            category_id=category.id if category is not None else None,
            metadata={
                "original_name": upload.name,
                "mime_type": upload.media_type,
                "storage_path": context.storage_path,
                "storage_bucket": context.bucket,
                "uploaded_by_role": context.uploader.role_code,
                "category_code": category.code if category is not None else None,
                "category_priority": category.priority_level if category is not None else None,
            },
        )

    def _discard_binary(self, context: PipelineContext) -> None:
        try:
            self._storage.delete(context.bucket, context.storage_path)
        except Exception as exc:
            Log.warning(
                f"Could not remove {context.bucket}/{context.storage_path} "
                f"after failed save: {exc}"
            )


class SummarizeStep(PipelineStep):
    best_effort = True

    def __init__(self, fanout: FanoutOrchestrator) -> None:
        self._fanout = fanout

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before summarization")
        context.advance(85, TaskStage.SUMMARIZING)
        context.fanout_report = self._fanout.run(
            context.document.id,
            context.extracted_text,
            context.upload.name,
        )
        return context


class NotifyStep(PipelineStep):
    best_effort = True

    def __init__(self, dispatcher: NotificationDispatcher) -> None:
        self._dispatcher = dispatcher

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before notification")
        if context.category is None:
            Log.debug(f"No category for document {context.document.id}, skipping notifications")
            return context
        context.notified_count = self._dispatcher.dispatch(
            context.document.id,
            context.upload.name,
            context.category,
            context.uploader.user_id,
        )
        return context
