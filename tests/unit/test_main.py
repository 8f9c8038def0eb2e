from unittest.mock import MagicMock, patch

import pytest

from app.ingestion.models import TaskStatus, UploadTask
from app.main import main, parse_args


def _finished(status: TaskStatus) -> UploadTask:
    task = UploadTask(file_name="a.pdf")
    task.start()
    if status is TaskStatus.COMPLETED:
        task.document_id = "doc-1"
        task.complete()
    else:
        task.fail("Database save failed: boom")
    return task


class TestParseArgs:
    def test_parses_files_and_uploader(self) -> None:
        args = parse_args(["a.pdf", "b.png", "--user-id", "u1", "--role", "HR"])
        assert [p.name for p in args.files] == ["a.pdf", "b.png"]
        assert args.user_id == "u1"
        assert args.role == "HR"
        assert args.category is None

    def test_rejects_unknown_role(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["a.pdf", "--user-id", "u1", "--role", "JANITOR"])


@patch("app.main.SummarizerFactory")
@patch("app.main.close_pool")
@patch("app.main.init_pool")
@patch("app.main.build_pipeline")
@patch("app.main.UploadWorker")
class TestMain:
    def _wire(self, mock_worker_cls: MagicMock, results: list[UploadTask]) -> MagicMock:
        worker = MagicMock()
        mock_worker_cls.return_value.__enter__.return_value = worker
        worker.wait.return_value = results
        return worker

    def test_returns_zero_when_all_complete(
        self, mock_worker_cls, mock_build, _init, mock_close, mock_factory, tmp_path
    ) -> None:
        path = tmp_path / "a.pdf"
        path.write_bytes(b"%PDF")
        worker = self._wire(mock_worker_cls, [_finished(TaskStatus.COMPLETED)])

        code = main([str(path), "--user-id", "u1", "--role", "SAFETY", "--category", "SAFETY"])

        assert code == 0
        upload, uploader = worker.submit.call_args.args
        assert upload.media_type == "application/pdf"
        assert uploader.category_code == "SAFETY"
        summarizer = mock_factory.create.return_value
        assert mock_build.call_args.kwargs["summarizer"] is summarizer
        summarizer.close.assert_called_once()
        mock_close.assert_called_once()

    def test_returns_one_when_a_task_fails(
        self, mock_worker_cls, _build, _init, _close, _factory, tmp_path
    ) -> None:
        path = tmp_path / "a.pdf"
        path.write_bytes(b"%PDF")
        self._wire(mock_worker_cls, [_finished(TaskStatus.ERROR)])

        assert main([str(path), "--user-id", "u1", "--role", "HR"]) == 1

    def test_missing_file_is_rejected(
        self, mock_worker_cls, _build, _init, _close, _factory, tmp_path
    ) -> None:
        worker = self._wire(mock_worker_cls, [])

        code = main([str(tmp_path / "missing.pdf"), "--user-id", "u1", "--role", "HR"])

        assert code == 1
        worker.submit.assert_not_called()

    def test_closes_summarizer_when_worker_fails(
        self, mock_worker_cls, _build, _init, mock_close, mock_factory, tmp_path
    ) -> None:
        mock_worker_cls.return_value.__enter__.side_effect = RuntimeError("pool exhausted")

        with pytest.raises(RuntimeError):
            main([str(tmp_path / "a.pdf"), "--user-id", "u1", "--role", "HR"])

        mock_factory.create.return_value.close.assert_called_once()
        mock_close.assert_called_once()
