"""
Unit tests for application assembly (users_api.main).
"""
import pytest
from fastapi.testclient import TestClient

from users_api.core.config import Settings
from users_api.di.container import DIContainer
from users_api.main import create_application


class TestCreateApplication:
    """Tests for create_application"""

    def test_routes_registered(self, sqlite_settings):
        application = create_application(sqlite_settings)
        paths = set(application.openapi()["paths"])
        assert {"/health", "/api/users", "/api/users/{user_id}"} <= paths

    def test_settings_kept_on_state(self, sqlite_settings):
        application = create_application(sqlite_settings)
        assert application.state.settings is sqlite_settings

    def test_lifespan_builds_container(self, sqlite_settings):
        application = create_application(sqlite_settings)
        with TestClient(application):
            assert isinstance(application.state.container, DIContainer)

    def test_missing_database_url_fails_startup(self):
        application = create_application(Settings(database_url="", log_level="WARNING"))
        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            with TestClient(application):
                pass

    def test_user_routes_resolve_by_name(self, sqlite_settings):
        application = create_application(sqlite_settings)
        assert application.url_path_for("get_user", user_id=1) == "/api/users/1"
        assert application.url_path_for("delete_user", user_id=1) == "/api/users/1"
