from app.database.connection import get_connection


class UserRolesRepository:
    """Lookups over user_roles joined with roles."""

    def find_active_user_ids(self, role_codes: list[str]) -> list[str]:
        """Return distinct users holding any of ``role_codes`` through an active assignment."""
        if not role_codes:
            return []
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT DISTINCT ur.user_id
                    FROM user_roles ur
                    JOIN roles r ON r.id = ur.role_id
                    WHERE ur.is_active = TRUE
                      AND r.role_code = ANY(%s)
                    ORDER BY ur.user_id
                    """,
                    (list(role_codes),),
                )
                rows = cur.fetchall()
        return [str(row[0]) for row in rows]
