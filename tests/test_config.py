"""Tests for settings."""

from guest_registry.config import Settings


def test_defaults_keep_one_second_floor(monkeypatch) -> None:
    monkeypatch.delenv("MIN_LOADING_MS", raising=False)
    monkeypatch.delenv("RECORD_STORE", raising=False)

    settings = Settings()

    assert settings.record_store == "supabase"
    assert settings.guests_collection == "guests"
    assert settings.min_loading_seconds == 1.0


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("RECORD_STORE", "pocketbase")
    monkeypatch.setenv("POCKETBASE_URL", "http://pb.internal:8090")
    monkeypatch.setenv("MIN_LOADING_MS", "250")

    settings = Settings()

    assert settings.record_store == "pocketbase"
    assert settings.pocketbase_url == "http://pb.internal:8090"
    assert settings.min_loading_seconds == 0.25


def test_negative_floor_is_clamped() -> None:
    assert Settings(min_loading_ms=-5).min_loading_seconds == 0
