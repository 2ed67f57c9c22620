"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify users_api package can be imported."""
    from users_api.core.config import Settings

    settings = Settings()
    assert settings is not None
    assert hasattr(settings, "database_url")


def test_settings_build_server_address():
    """Explicit settings produce the host:port the server binds to."""
    from users_api.core.config import Settings

    settings = Settings(server_host="127.0.0.1", server_port=3000)
    assert settings.server_addr == "127.0.0.1:3000"
