from studentbot.common import settings as s
from studentbot.common.settings import get_settings


def test_settings_defaults():
    cfg = get_settings()
    assert cfg.app_name == "studentbot"
    assert cfg.app_env == "development"
    assert cfg.log_level == "INFO"
    assert cfg.payload.by_alias is True
    assert cfg.payload.exclude_none is False


def test_settings_cached():
    assert get_settings() is get_settings()


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PAYLOAD__BY_ALIAS", "no")
    monkeypatch.setenv("PAYLOAD__EXCLUDE_NONE", "ON")
    s.get_settings.cache_clear()

    cfg = get_settings()
    assert cfg.app_env == "test"
    assert cfg.log_level == "debug"
    assert cfg.payload.by_alias is False
    assert cfg.payload.exclude_none is True


def test_settings_from_dotenv(tmp_path):
    # conftest chdirs into tmp_path, so this is the .env pydantic-settings reads
    (tmp_path / ".env").write_text("APP_NAME=linkbot\nPAYLOAD__BY_ALIAS=0\n", encoding="utf-8")
    s.get_settings.cache_clear()

    cfg = get_settings()
    assert cfg.app_name == "linkbot"
    assert cfg.payload.by_alias is False
