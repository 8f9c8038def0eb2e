from psycopg.rows import dict_row

from app.database.connection import get_connection
from app.database.models import CategoryRecord


class CategoriesRepository:
    """Read-only access to the document_categories reference table."""

    def find_by_code(self, code: str) -> CategoryRecord | None:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, category_code, category_name, priority_level, target_roles
                    FROM document_categories
                    WHERE category_code = %s
                    """,
                    (code,),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return CategoryRecord(
            id=str(row["id"]),
            code=row["category_code"],
            name=row["category_name"],
            priority_level=row["priority_level"] or 1,
            target_roles=list(row["target_roles"] or []),
        )
