import os
from dataclasses import dataclass
from pathlib import Path

import streamlit as st

SECRETS_SECTION = "liftlog"


def get_secret(key: str, default=None):
    """
    Look up a config value.

    Order: top level Streamlit secrets, the [liftlog] section, env, default.
    """
    # 1. Top level secrets
    try:
        if key in st.secrets:
            return st.secrets[key]
    except Exception:
        pass

    # 2. Nested section [liftlog]
    try:
        section = st.secrets.get(SECRETS_SECTION, {})
        if key in section:
            return section[key]
    except Exception:
        pass

    # 3. Environment
    value = os.getenv(key)
    if value:
        return value
    return default


@dataclass
class AppConfig:
    settings_path: Path = Path("settings.json")
    image_dir: Path = Path("images")
    log_level: str = "INFO"
    user_name: str = "Jane Doe"


def load_app_config() -> AppConfig:
    defaults = AppConfig()
    return AppConfig(
        settings_path=Path(get_secret("LIFTLOG_SETTINGS_PATH", str(defaults.settings_path))),
        image_dir=Path(get_secret("LIFTLOG_IMAGE_DIR", str(defaults.image_dir))),
        log_level=str(get_secret("LIFTLOG_LOG_LEVEL", defaults.log_level)).upper(),
        user_name=str(get_secret("LIFTLOG_USER_NAME", defaults.user_name)),
    )
