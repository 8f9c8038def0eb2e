import pytest

from app.database.models import RoleSummaryRecord
from app.database.repositories.role_summaries_repository import RoleSummariesRepository


@pytest.mark.integration
class TestRoleSummariesRepository:
    def test_upsert_overwrites_existing_row(self, seed_document: str) -> None:
        repo = RoleSummariesRepository()
        repo.upsert(RoleSummaryRecord(seed_document, "HR", "First.", ["a"], [], 2))
        repo.upsert(RoleSummaryRecord(seed_document, "HR", "Second.", ["b"], ["c"], 5))

        rows = repo.find_for_document(seed_document)

        assert len(rows) == 1
        assert rows[0].summary_text == "Second."
        assert rows[0].key_points == ["b"]
        assert rows[0].action_items == ["c"]
        assert rows[0].priority_score == 5

    def test_one_row_per_role(self, seed_document: str) -> None:
        repo = RoleSummariesRepository()
        for role_code in ("HR", "SAFETY"):
            repo.upsert(RoleSummaryRecord(seed_document, role_code, "Summary."))

        rows = repo.find_for_document(seed_document)

        assert [row.role_code for row in rows] == ["HR", "SAFETY"]
