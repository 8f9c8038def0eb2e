import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait

from app.config.settings import Settings
from app.ingestion.models import IncomingFile, Uploader, UploadTask
from app.ingestion.pipeline import ProgressListener
from app.ingestion.validation import validate_upload
from app.logging.logger import Log
from app.worker.task_runner import TaskRunner


class UploadWorker:
    """Accepts files and runs one upload task per file concurrently.

    Tasks share nothing but the task list kept here. Removing a task only
    hides it; a run that already started is not interrupted.
    """

    def __init__(self, task_runner: TaskRunner, settings: Settings) -> None:
        self._task_runner = task_runner
        self._max_upload_size = settings.max_upload_size_bytes
        self._executor = ThreadPoolExecutor(
            max_workers=settings.max_concurrent_uploads,
            thread_name_prefix="upload",
        )
        self._lock = threading.Lock()
        self._tasks: dict[str, UploadTask] = {}
        self._futures: dict[str, Future[UploadTask]] = {}

    def submit(
        self,
        upload: IncomingFile,
        uploader: Uploader,
        on_progress: ProgressListener | None = None,
    ) -> UploadTask:
        """Validate ``upload`` and schedule its pipeline run.

        Raises:
            UploadRejectedError: if the file is not accepted; no task is created.
        """
        validate_upload(upload, self._max_upload_size)
        task = UploadTask(file_name=upload.name)
        with self._lock:
            self._tasks[task.id] = task
            self._futures[task.id] = self._executor.submit(
                self._task_runner.run, task, upload, uploader, on_progress
            )
        Log.info(f"Accepted {upload.name} as upload task {task.id}")
        return task

    def tasks(self) -> list[UploadTask]:
        with self._lock:
            return list(self._tasks.values())

    def remove(self, task_id: str) -> None:
        """Hide a task. Its run keeps going and is forgotten once it finishes."""
        with self._lock:
            self._tasks.pop(task_id, None)
            future = self._futures.get(task_id)
        if future is not None:
            # runs immediately when the future is already done, so not under the lock
            future.add_done_callback(lambda _future: self._forget(task_id))

    def wait(self, timeout: float | None = None) -> list[UploadTask]:
        """Block until every submitted task has finished; return them in submit order.

        Removed tasks are not returned once their run has finished.
        """
        with self._lock:
            futures = list(self._futures.values())
        wait(futures, timeout=timeout)
        return [future.result() for future in futures if future.done()]

    def _forget(self, task_id: str) -> None:
        with self._lock:
            self._futures.pop(task_id, None)

    def shutdown(self, wait_for_tasks: bool = True) -> None:
        self._executor.shutdown(wait=wait_for_tasks)
        Log.info("Upload worker shut down")

    def __enter__(self) -> "UploadWorker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
