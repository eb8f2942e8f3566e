from __future__ import annotations

from api.config import Settings


def test_defaults(monkeypatch):
    for key in ("PORT", "GEMINI_API_KEY", "UPLOAD_DIR", "CLEANUP_ON_ERROR"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings.from_env()
    assert settings.port == 3690
    assert settings.gemini_api_key is None
    assert settings.gemini_model == "gemini-1.5-flash"
    assert settings.upload_dir == "upload"
    assert settings.cleanup_on_error is False
    assert settings.public_dir.endswith("public")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("UPLOAD_DIR", "/tmp/scratch")
    monkeypatch.setenv("CLEANUP_ON_ERROR", "yes")

    settings = Settings.from_env()
    assert settings.port == 8080
    assert settings.gemini_api_key == "secret"
    assert settings.upload_dir == "/tmp/scratch"
    assert settings.cleanup_on_error is True
