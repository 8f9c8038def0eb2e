import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from app.config.settings import Settings
from app.database.connection import close_pool, init_pool
from app.ingestion.exceptions import UploadRejectedError
from app.ingestion.ingestion_pipeline import build_pipeline
from app.ingestion.models import IncomingFile, TaskStatus, Uploader, UploadTask
from app.ingestion.validation import guess_media_type
from app.logging.logger import Log
from app.summarization.factory import SummarizerFactory
from app.summarization.roles import ROLE_CODES
from app.worker.task_runner import TaskRunner
from app.worker.worker import UploadWorker


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docbrief",
        description="Ingest documents and generate a summary for every role.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="PDF or image files to ingest")
    parser.add_argument("--user-id", required=True, help="id of the uploading user")
    parser.add_argument("--role", required=True, choices=ROLE_CODES, help="uploader's role")
    parser.add_argument("--category", default=None, help="category code offered to the role")
    return parser.parse_args(argv)


def _log_progress(task: UploadTask) -> None:
    stage = task.stage.value if task.stage is not None else "-"
    Log.debug(f"{task.file_name}: {task.status.value} {stage} {task.progress}%")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: initialize pool -> build dependencies -> ingest files."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    summarizer = SummarizerFactory.create(settings)
    init_pool(settings)

    uploader = Uploader(user_id=args.user_id, role_code=args.role, category_code=args.category)
    rejected = 0
    try:
        runner = TaskRunner(build_pipeline(settings, summarizer=summarizer))
        with UploadWorker(runner, settings) as worker:
            for path in args.files:
                try:
                    upload = IncomingFile.from_path(path, guess_media_type(path))
                    worker.submit(upload, uploader, on_progress=_log_progress)
                except (OSError, UploadRejectedError) as exc:
                    Log.error(f"Rejected {path}: {exc}")
                    rejected += 1
            tasks = worker.wait()
    finally:
        summarizer.close()
        close_pool()

    for task in tasks:
        detail = task.document_id if task.status is TaskStatus.COMPLETED else task.error
        print(f"{task.file_name}\t{task.status.value}\t{detail}")
    failed = sum(1 for task in tasks if task.status is TaskStatus.ERROR)
    return 1 if failed or rejected else 0


if __name__ == "__main__":
    sys.exit(main())
