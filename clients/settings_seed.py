import json
from pathlib import Path

from utils.log import get_logger

logger = get_logger(__name__)


def load_settings_seed(path: str | Path) -> dict:
    """
    Read initial settings/profile values from a local JSON object.

    Expected shape (every key optional):
        {"settings": {...Settings fields...}, "profile": {"name": ..., "image_reference": ...}}

    Anything unusable yields {} so the app starts with defaults.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No settings seed at %s", path)
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read settings seed %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings seed %s is not a JSON object, ignoring", path)
        return {}
    return data


def seed_section(seed: dict, name: str) -> dict:
    section = seed.get(name)
    return section if isinstance(section, dict) else {}
