import os
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from app.config.settings import Settings
from app.database.connection import close_pool, get_connection, init_pool

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "app" / "database" / "schema.sql"


def _test_settings() -> Settings:
    # the process environment is left untouched for the unit tests
    return Settings(db_database=os.environ.get("DB_DATABASE", "docbrief_test"))


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(SCHEMA_PATH.read_text())
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[tuple[str, str]], None, None]:
    cleanup: list[tuple[str, str]] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for table, row_id in cleanup:
                if table == "documents":
                    cur.execute("DELETE FROM notifications WHERE document_id = %s", (row_id,))
                    cur.execute("DELETE FROM documents WHERE id = %s", (row_id,))
            for table, row_id in cleanup:
                if table == "user_roles":
                    cur.execute("DELETE FROM user_roles WHERE user_id = %s", (row_id,))
        conn.commit()


@pytest.fixture
def seed_document(
    db_conn: psycopg.Connection[Any],
    integration_cleanup: list[tuple[str, str]],
) -> str:
    with db_conn.cursor() as cur:
        cur.execute(
            """
            INSERT INTO documents (title, content, file_type, file_size, user_id)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING id
            """,
            ("seed.pdf", "Seed content", "pdf", 10, str(uuid.uuid4())),
        )
        row = cur.fetchone()
        assert row is not None
        document_id = str(row[0])
    db_conn.commit()
    integration_cleanup.append(("documents", document_id))
    return document_id


@pytest.fixture
def seed_role_users(
    db_conn: psycopg.Connection[Any],
    integration_cleanup: list[tuple[str, str]],
) -> dict[str, str]:
    """Three users: active SAFETY, active SAFETY+EXECUTIVE, inactive SAFETY."""
    users = {name: str(uuid.uuid4()) for name in ("safety", "both", "inactive")}
    assignments = [
        (users["safety"], "SAFETY", True),
        (users["both"], "SAFETY", True),
        (users["both"], "EXECUTIVE", True),
        (users["inactive"], "SAFETY", False),
    ]
    with db_conn.cursor() as cur:
        for user_id, role_code, is_active in assignments:
            cur.execute(
                """
                INSERT INTO user_roles (user_id, role_id, is_active)
                SELECT %s, id, %s FROM roles WHERE role_code = %s
                """,
                (user_id, is_active, role_code),
            )
    db_conn.commit()
    for user_id in users.values():
        integration_cleanup.append(("user_roles", user_id))
    return users
