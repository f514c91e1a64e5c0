from pathlib import Path

from utils.secrets import AppConfig, get_secret, load_app_config


def test_get_secret_falls_back_to_env(monkeypatch) -> None:
    monkeypatch.setenv("LIFTLOG_TEST_VALUE", "from-env")

    assert get_secret("LIFTLOG_TEST_VALUE") == "from-env"


def test_get_secret_default(monkeypatch) -> None:
    monkeypatch.delenv("LIFTLOG_TEST_VALUE", raising=False)

    assert get_secret("LIFTLOG_TEST_VALUE", "fallback") == "fallback"


def test_load_app_config_defaults(monkeypatch) -> None:
    for key in ("LIFTLOG_SETTINGS_PATH", "LIFTLOG_IMAGE_DIR", "LIFTLOG_LOG_LEVEL", "LIFTLOG_USER_NAME"):
        monkeypatch.delenv(key, raising=False)

    assert load_app_config() == AppConfig()


def test_load_app_config_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LIFTLOG_SETTINGS_PATH", str(tmp_path / "s.json"))
    monkeypatch.setenv("LIFTLOG_IMAGE_DIR", str(tmp_path))
    monkeypatch.setenv("LIFTLOG_LOG_LEVEL", "debug")
    monkeypatch.setenv("LIFTLOG_USER_NAME", "Sam Smith")

    config = load_app_config()

    assert config.settings_path == tmp_path / "s.json"
    assert config.image_dir == tmp_path
    assert config.log_level == "DEBUG"
    assert config.user_name == "Sam Smith"
