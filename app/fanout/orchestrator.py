"""Runs summarization once per role and records the results.

For every role the summary is upserted by (document_id, role_code), so a
re-run overwrites earlier rows. After each role the document severity is
raised to the new value if it is higher, using an atomic max update. A
failure for one role is logged and the loop moves on to the next role.
"""

from dataclasses import dataclass, field

from app.database.models import RoleSummaryRecord
from app.database.repositories.documents_repository import DocumentsRepository
from app.database.repositories.role_summaries_repository import RoleSummariesRepository
from app.fanout.exceptions import FanoutPersistenceError
from app.logging.logger import Log
from app.summarization.models import PostProcessedSummary, SummaryResult
from app.summarization.post_processor import PostProcessor
from app.summarization.roles import ROLE_CODES
from app.summarization.summarizer import Summarizer


@dataclass
class FanoutReport:
    """Outcome of one fanout run over all roles."""

    document_id: str
    succeeded: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    max_severity: int = 1


class FanoutOrchestrator:
    """Produces and stores one summary per role for a document."""

    def __init__(
        self,
        summarizer: Summarizer,
        post_processor: PostProcessor,
        summaries_repo: RoleSummariesRepository,
        documents_repo: DocumentsRepository,
        role_codes: tuple[str, ...] = ROLE_CODES,
    ) -> None:
        self._summarizer = summarizer
        self._post_processor = post_processor
        self._summaries_repo = summaries_repo
        self._documents_repo = documents_repo
        self._role_codes = role_codes

    def run(self, document_id: str, content: str, title: str) -> FanoutReport:
        report = FanoutReport(document_id=document_id)
        for role_code in self._role_codes:
            try:
                severity = self._run_role(document_id, role_code, content, title)
            except Exception as exc:
                Log.error(f"Failed to summarize document {document_id} for role {role_code}: {exc}")
                report.failed[role_code] = str(exc)
                continue
            report.succeeded.append(role_code)
            report.max_severity = max(report.max_severity, severity)

        Log.info(
            f"Fanout for document {document_id}: {len(report.succeeded)} roles summarized, "
            f"{len(report.failed)} failed, max severity {report.max_severity}"
        )
        return report

    def _run_role(self, document_id: str, role_code: str, content: str, title: str) -> int:
        result = self._summarizer.summarize(content, role_code, title)
        derived = self._post_processor.process(result.summary, content, role_code)
        self._persist(document_id, role_code, result, derived)
        Log.debug(
            f"Role {role_code} summary for document {document_id} from {result.source.value}: "
            f"priority {derived.priority_score}, severity {derived.severity}"
        )
        return derived.severity

    def _persist(
        self,
        document_id: str,
        role_code: str,
        result: SummaryResult,
        derived: PostProcessedSummary,
    ) -> None:
        record = RoleSummaryRecord(
            document_id=document_id,
            role_code=role_code,
            summary_text=result.summary,
            key_points=derived.key_points,
            action_items=derived.action_items,
            priority_score=derived.priority_score,
        )
        try:
            self._summaries_repo.upsert(record)
            if self._documents_repo.raise_severity(document_id, derived.severity):
                Log.info(f"Document {document_id} severity raised to {derived.severity}")
        except Exception as exc:
            raise FanoutPersistenceError(
                f"Could not store {role_code} summary for document {document_id}: {exc}"
            ) from exc
