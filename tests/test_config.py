import pytest

from taskgraph.config import Settings, load_settings, normalize_log_level


def test_defaults():
    settings = load_settings()
    assert settings == Settings(verify_invariants=True, log_level="WARNING")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TASKGRAPH_VERIFY_INVARIANTS", "no")
    monkeypatch.setenv("TASKGRAPH_LOG_LEVEL", "debug")
    load_settings.cache_clear()
    settings = load_settings()
    assert settings.verify_invariants is False
    assert settings.log_level == "DEBUG"


def test_unknown_env_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("TASKGRAPH_LOG_LEVEL", "chatty")
    load_settings.cache_clear()
    assert load_settings().log_level == "WARNING"


def test_with_overrides():
    settings = Settings().with_overrides(verify_invariants=False, log_level="info")
    assert settings == Settings(verify_invariants=False, log_level="INFO")
    assert Settings().with_overrides() == Settings()


def test_normalize_log_level_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown log level"):
        normalize_log_level("loud")
