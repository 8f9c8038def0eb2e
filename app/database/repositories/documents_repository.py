from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from app.database.connection import get_connection
from app.database.exceptions import DocumentNotFoundError
from app.database.models import DocumentRecord, NewDocument


class DocumentsRepository:
    """Database operations for the documents table."""

    def insert(self, document: NewDocument) -> DocumentRecord:
        """Insert a document row and return it with its generated id."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    INSERT INTO documents
                    (title, content, file_type, file_size, file_url, user_id,
                     category_id, is_public, tags, severity_level, status, metadata)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING id, created_at
                    """,
                    (
                        document.title,
                        document.content,
                        document.file_type,
                        document.file_size,
                        document.file_url,
                        document.user_id,
                        document.category_id,
                        document.is_public,
                        document.tags,
                        document.severity_level,
                        document.status,
                        Jsonb(document.metadata),
                    ),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT INTO documents returned no row")

        return DocumentRecord(
            id=str(row["id"]),
            title=document.title,
            file_type=document.file_type,
            file_size=document.file_size,
            user_id=document.user_id,
            category_id=document.category_id,
            severity_level=document.severity_level,
            status=document.status,
            content=document.content,
            file_url=document.file_url,
            metadata=dict(document.metadata),
            tags=list(document.tags),
            created_at=row["created_at"],
        )

    def find_by_id(self, document_id: str) -> DocumentRecord:
        """Find a document by ID.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, title, content, file_type, file_size, file_url, user_id,
                           category_id, severity_level, status, metadata, tags, created_at
                    FROM documents
                    WHERE id = %s
                    """,
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")

        return DocumentRecord(
            id=str(row["id"]),
            title=row["title"],
            file_type=row["file_type"],
            file_size=row["file_size"],
            user_id=str(row["user_id"]),
            category_id=str(row["category_id"]) if row["category_id"] is not None else None,
            severity_level=row["severity_level"] or 1,
            status=row["status"],
            content=row["content"] or "",
            file_url=row["file_url"] or "",
            metadata=row["metadata"] or {},
            tags=list(row["tags"] or []),
            created_at=row["created_at"],
        )

    def raise_severity(self, document_id: str, severity: int) -> bool:
        """Set severity to ``severity`` only if it is higher than the stored value.

        The comparison and the write happen in one UPDATE statement, so
        concurrent callers can never lower the stored value.

        Returns:
            True if the stored severity changed.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE documents
                    SET severity_level = %s, updated_at = NOW()
                    WHERE id = %s
                      AND COALESCE(severity_level, 1) < %s
                    """,
                    (severity, document_id, severity),
                )
                changed = cur.rowcount > 0
            conn.commit()
        return changed
