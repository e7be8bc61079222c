from app.core.config import Settings, DEFAULT_JWT_SECRET


def test_server_address_comes_from_environment(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = Settings.from_env()

    assert settings.HOST == "127.0.0.1"
    assert settings.PORT == 9001
    assert not settings.is_development


def test_server_address_defaults(monkeypatch):
    for name in ("HOST", "PORT", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8000
    assert settings.is_development


def test_missing_jwt_secret_falls_back_to_development_secret(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)

    assert Settings.from_env().JWT_SECRET == DEFAULT_JWT_SECRET


def test_cors_origins_are_split_and_trimmed(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://shop.io, https://admin.shop.io ,")

    assert Settings.from_env().CORS_ORIGINS == ["https://shop.io", "https://admin.shop.io"]
