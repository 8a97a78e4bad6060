"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real project YAML files.
Failure scenarios use tmp_path to create controlled filesystems.
"""

import pytest

from fittrack.backend.core.config import (
    AppConfig,
    Settings,
    find_project_root,
    get_app_config,
    get_database_url,
    get_server_base_url,
    get_settings,
    load_yaml_config,
    validate_project_root,
)
from fittrack.backend.core.config_schema import (
    ApplicationSchema,
    HealthChecksSchema,
    LoggingSchema,
    PaginationSchema,
)


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


class TestFindProjectRoot:

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert (root / ".project_root").exists()
        assert (root / "config" / "settings").is_dir()

    def test_validate_returns_root(self):
        assert (validate_project_root() / ".project_root").exists()


class TestLoadYamlConfig:

    def test_loads_application_yaml(self):
        raw = load_yaml_config("application.yaml")
        assert raw["name"] == "FitTrack"

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_yaml_config("does_not_exist.yaml")


class TestAppConfig:

    def test_sections_are_typed(self):
        config = AppConfig()
        assert isinstance(config.application, ApplicationSchema)
        assert config.application.api_prefix == "/api/v1"
        assert config.database.port > 0
        assert config.observability.health_checks.ready_timeout_seconds > 0

    def test_get_app_config_is_cached(self):
        assert get_app_config() is get_app_config()

    def test_pagination_default_must_not_exceed_max(self):
        with pytest.raises(ValueError):
            PaginationSchema(default_limit=500, max_limit=100)

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValueError):
            PaginationSchema(default_limit=10, max_limit=100, cursor=True)

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError):
            LoggingSchema(
                level="VERBOSE",
                format="console",
                handlers={
                    "console": {"enabled": True},
                    "file": {"enabled": False, "path": "logs/x.jsonl", "max_bytes": 1, "backup_count": 0},
                },
            )

    def test_health_checks_accept_only_ready_timeout(self):
        with pytest.raises(ValueError):
            HealthChecksSchema(ready_timeout_seconds=5, detailed_auth_required=False)


class TestDatabaseUrl:

    def test_override_wins(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./override.db")
        assert get_database_url() == "sqlite+aiosqlite:///./override.db"

    def test_composed_from_yaml(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("DB_PASSWORD", "pw")
        if get_settings().database_url:
            pytest.skip("DATABASE_URL set in config/.env")
        db = get_app_config().database

        url = get_database_url()

        assert url == f"postgresql+asyncpg://{db.user}:pw@{db.host}:{db.port}/{db.name}"

    def test_sync_driver(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        if get_settings().database_url:
            pytest.skip("DATABASE_URL set in config/.env")
        assert get_database_url(async_driver=False).startswith("postgresql://")


class TestServerBaseUrl:

    def test_from_application_yaml(self):
        server = get_app_config().application.server
        base_url, timeout = get_server_base_url()
        assert base_url == f"http://{server.host}:{server.port}"
        assert timeout == float(get_app_config().application.timeouts.cli_request)


class TestSettings:

    def test_defaults_without_env(self, monkeypatch):
        monkeypatch.delenv("DB_PASSWORD", raising=False)
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.db_password == ""
        assert settings.database_url is None
