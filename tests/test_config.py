from pathlib import Path

import pytest

from nhltracker.config import DB_PATH_ENV, LOG_LEVEL_ENV, load_settings, normalize_log_level
from nhltracker.config_loader import TrackerProfile


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(DB_PATH_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    settings = load_settings()

    assert settings.db_path == Path("nhltracker.db")
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv(DB_PATH_ENV, str(tmp_path / "roster.db"))
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    settings = load_settings()

    assert settings.db_path == tmp_path / "roster.db"
    assert settings.log_level == "DEBUG"


def test_memory_path_is_kept_verbatim(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(DB_PATH_ENV, ":memory:")

    assert load_settings().db_path == ":memory:"


def test_unknown_log_level_falls_back():
    assert normalize_log_level("chatty") == "WARNING"
    assert normalize_log_level("chatty", "INFO") == "INFO"
    assert normalize_log_level(None) == "WARNING"


def test_profile_round_trip(tmp_path: Path):
    path = tmp_path / "profile.json"
    TrackerProfile(db_path="roster.db", log_level="INFO").save(path)

    loaded = TrackerProfile.load(path)

    assert loaded.db_path == "roster.db"
    assert loaded.log_level == "INFO"


def test_profile_tolerates_missing_keys(tmp_path: Path):
    path = tmp_path / "profile.json"
    path.write_text("{}", encoding="utf-8")

    loaded = TrackerProfile.load(path)

    assert loaded.db_path is None
    assert loaded.log_level is None


@pytest.mark.parametrize("payload", ['["x"]', '"roster.db"', "3"])
def test_profile_must_be_a_json_object(tmp_path: Path, payload: str):
    path = tmp_path / "profile.json"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(ValueError, match="JSON object"):
        TrackerProfile.load(path)


def test_profile_rejects_non_string_values(tmp_path: Path):
    path = tmp_path / "profile.json"
    path.write_text('{"db_path": 7}', encoding="utf-8")

    with pytest.raises(ValueError, match="db_path"):
        TrackerProfile.load(path)
