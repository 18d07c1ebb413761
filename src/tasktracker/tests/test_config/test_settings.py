import pytest
from pydantic import ValidationError

from tasktracker.config.settings import Settings


def make_settings(**overrides) -> Settings:
    # _env_file=None keeps a developer's .env out of the test
    return Settings(_env_file=None, **overrides)


class TestDatabaseUrl:

    def test_sqlite_fallback(self, tmp_path):
        settings = make_settings(SQLITE_PATH=tmp_path / "x.db")
        assert settings.DATABASE_URL == f"sqlite+aiosqlite:///{tmp_path / 'x.db'}"

    def test_postgres_url(self):
        settings = make_settings(
            POSTGRES_USERNAME="app", POSTGRES_PASSWORD="pw", POSTGRES_HOST="db", POSTGRES_DB="tracker"
        )
        assert settings.DATABASE_URL == "postgresql+asyncpg://app:pw@db:5432/tracker"

    def test_testing_selects_test_database(self):
        settings = make_settings(
            POSTGRES_USERNAME="app", POSTGRES_PASSWORD="pw", POSTGRES_HOST="db", POSTGRES_DB="tracker",
            TESTING=True, TEST_POSTGRES_DB="tracker_test",
        )
        assert settings.DATABASE_URL.endswith("/tracker_test")

    def test_override_wins(self):
        settings = make_settings(DATABASE_URL_OVERRIDE="sqlite+aiosqlite:///:memory:", POSTGRES_HOST="db")
        assert settings.DATABASE_URL == "sqlite+aiosqlite:///:memory:"


class TestNormalization:

    def test_case_normalizers(self):
        settings = make_settings(LOG_LEVEL=" debug ", LOG_FORMAT="TEXT", ERROR_LANGUAGE="JA")
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FORMAT == "text"
        assert settings.ERROR_LANGUAGE == "ja"

    def test_unsupported_language(self):
        with pytest.raises(ValidationError):
            make_settings(ERROR_LANGUAGE="fr")

    def test_page_size_bounds_per_entity(self):
        settings = make_settings(USER_ASSIGN_MAX_PAGE_SIZE=101)
        assert settings.max_page_size("task") == 100
        assert settings.max_page_size("user_assign") == 101
        with pytest.raises(ValidationError):
            make_settings(TASK_MAX_PAGE_SIZE=0)


@pytest.mark.asyncio
async def test_repository_from_settings(session_factory):
    from tasktracker.repositories import CommentRepository

    repository = CommentRepository.from_settings(
        session_factory, make_settings(ERROR_LANGUAGE="ja", COMMENT_MAX_PAGE_SIZE=10)
    )
    assert repository.language == "ja"
    assert repository.max_page_size == 10
