from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from app.database.connection import get_connection
from app.database.models import RoleSummaryRecord


class RoleSummariesRepository:
    """Database operations for the document_summaries table."""

    def upsert(self, summary: RoleSummaryRecord) -> None:
        """Insert or overwrite the summary keyed by (document_id, role_code)."""
        with get_connection() as conn:
            conn.execute(
                """
                INSERT INTO document_summaries
                (document_id, role_code, summary_text, key_points, action_items,
                 priority_score, generated_at)
                VALUES (%s, %s, %s, %s, %s, %s, NOW())
                ON CONFLICT (document_id, role_code) DO UPDATE
                SET summary_text = EXCLUDED.summary_text,
                    key_points = EXCLUDED.key_points,
                    action_items = EXCLUDED.action_items,
                    priority_score = EXCLUDED.priority_score,
                    generated_at = NOW()
                """,
                (
                    summary.document_id,
                    summary.role_code,
                    summary.summary_text,
                    Jsonb(summary.key_points),
                    Jsonb(summary.action_items),
                    summary.priority_score,
                ),
            )
            conn.commit()

    def find_for_document(self, document_id: str) -> list[RoleSummaryRecord]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT document_id, role_code, summary_text, key_points,
                           action_items, priority_score, generated_at
                    FROM document_summaries
                    WHERE document_id = %s
                    ORDER BY role_code
                    """,
                    (document_id,),
                )
                rows = cur.fetchall()

        return [
            RoleSummaryRecord(
                document_id=str(row["document_id"]),
                role_code=row["role_code"],
                summary_text=row["summary_text"],
                key_points=list(row["key_points"] or []),
                action_items=list(row["action_items"] or []),
                priority_score=row["priority_score"],
                generated_at=row["generated_at"],
            )
            for row in rows
        ]
