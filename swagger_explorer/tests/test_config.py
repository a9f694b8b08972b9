from swagger_explorer.config import Settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "UPLOAD_DIR", "CORS_ORIGINS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.PORT == 3000
    assert s.UPLOAD_DIR == "uploads"
    assert s.CORS_ORIGINS == ["*"]
    assert s.LOG_FORMAT == "json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("UPLOAD_DIR", "/tmp/specs")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:5173"]')
    monkeypatch.setenv("LOG_FORMAT", "text")

    s = Settings(_env_file=None)

    assert s.PORT == 8080
    assert s.UPLOAD_DIR == "/tmp/specs"
    assert s.CORS_ORIGINS == ["http://localhost:5173"]
    assert s.LOG_FORMAT == "text"
