from app.ingestion.ingestion_pipeline import IngestionPipeline
from app.ingestion.models import IncomingFile, Uploader, UploadTask
from app.ingestion.pipeline import ProgressListener
from app.logging.logger import Log


class TaskRunner:
    """Run one upload task and make sure it ends in a terminal status."""

    def __init__(self, pipeline: IngestionPipeline) -> None:
        self._pipeline = pipeline

    def run(
        self,
        task: UploadTask,
        upload: IncomingFile,
        uploader: Uploader,
        on_progress: ProgressListener | None = None,
    ) -> UploadTask:
        Log.info(f"Running upload task {task.id} for {upload.name}")
        try:
            self._pipeline.process(task, upload, uploader, on_progress)
        except Exception as exc:
            self._handle_failure(task, exc)
        return task

    def _handle_failure(self, task: UploadTask, exc: Exception) -> None:
        if task.is_terminal:
            # the pipeline already recorded and logged the failure
            Log.error(f"Upload task {task.id} failed: {exc}")
            return
        Log.exception(f"Upload task {task.id} failed outside the pipeline: {exc}")
        task.fail(str(exc) or type(exc).__name__)
