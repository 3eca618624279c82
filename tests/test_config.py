"""Tests for configuration."""

from exercise_tracker.config import Settings, parse_cors_origins


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("PORT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.cors_allow_origins == "*"


def test_settings_reads_port_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")

    assert Settings(_env_file=None).port == 8080


def test_parse_cors_origins() -> None:
    assert parse_cors_origins(None) == ["*"]
    assert parse_cors_origins(" * ") == ["*"]
    assert parse_cors_origins("https://a.example, ,https://b.example") == [
        "https://a.example",
        "https://b.example",
    ]
