from app.database.connection import get_connection


class NotificationsRepository:
    """Writes rows into the notifications table."""

    def create(
        self,
        user_id: str,
        title: str,
        message: str,
        notification_type: str,
        document_id: str | None,
    ) -> str:
        """Insert a notification and return its id."""
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO notifications (user_id, title, message, type, document_id)
                    VALUES (%s, %s, %s, %s, %s)
                    RETURNING id
                    """,
                    (user_id, title, message, notification_type, document_id),
                )
                row = cur.fetchone()
            conn.commit()
        if row is None:
            raise RuntimeError("INSERT INTO notifications returned no row")
        return str(row[0])
