from dataclasses import dataclass, fields
from typing import Any, Mapping

GENDER_OPTIONS = ("Male", "Female", "Non-binary", "Prefer not to specify")
DEFAULT_GENDER = "Prefer not to specify"

# Birthday is stored as text, e.g. "12/25/1990"
BIRTHDAY_FORMAT = "%m/%d/%Y"

PASSWORD_MASK = "•••••••••"
WEIGHT_UNIT = "lbs"

TOGGLE_FIELDS = (
    "profile_public",
    "auto_share_workouts",
    "notifications",
    "rest_day_reminders",
    "water_intake_reminders",
    "workout_reminders",
)

TEXT_FIELDS = (
    "weight",
    "gender",
    "birthday",
    "username",
    "password",
)


@dataclass
class Settings:
    profile_public: bool = False
    auto_share_workouts: bool = False
    notifications: bool = False
    rest_day_reminders: bool = False
    water_intake_reminders: bool = False
    workout_reminders: bool = False
    weight: str = ""
    gender: str = ""
    birthday: str = ""
    username: str = ""
    password: str = ""


@dataclass
class UserProfile:
    name: str = ""
    image_reference: str | None = None


SETTINGS_FIELDS = tuple(f.name for f in fields(Settings))


def settings_from_mapping(raw: Mapping[str, Any] | None) -> Settings:
    """
    Build a Settings record from a loosely typed mapping (seed file, session).

    Unknown keys are ignored and missing keys keep their defaults, so every
    field always holds a value.
    """
    settings = Settings()
    if not raw:
        return settings

    for name in TOGGLE_FIELDS:
        if name in raw:
            setattr(settings, name, bool(raw[name]))
    for name in TEXT_FIELDS:
        value = raw.get(name)
        if value is not None:
            setattr(settings, name, str(value))
    return settings


def profile_from_mapping(raw: Mapping[str, Any] | None, default_name: str = "") -> UserProfile:
    raw = raw or {}
    name = raw.get("name")
    image_reference = raw.get("image_reference") or None
    return UserProfile(
        name=str(name) if name is not None else default_name,
        image_reference=str(image_reference) if image_reference else None,
    )
