from dataclasses import asdict, replace
from typing import Any, Callable

from data_model import (
    PASSWORD_MASK,
    SETTINGS_FIELDS,
    TOGGLE_FIELDS,
    Settings,
    UserProfile,
)
from utils.log import get_logger

logger = get_logger(__name__)

# (field, old value, new value)
ChangeListener = Callable[[str, Any, Any], None]


class _Observable:
    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, name: str, old: Any, new: Any) -> None:
        for listener in list(self._listeners):
            listener(name, old, new)


class SettingsStore(_Observable):
    """
    Single owner of the user's Settings.

    Reads are open to every row; writes are synchronous and visible
    immediately. The store accepts any string for text fields, validation
    happens in the edit sessions before a write is issued.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = replace(settings) if settings is not None else Settings()

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not found normally
        if name in SETTINGS_FIELDS:
            return getattr(self._settings, name)
        raise AttributeError(name)

    def get(self, name: str) -> Any:
        self._check_field(name)
        return getattr(self._settings, name)

    def set(self, name: str, value: Any) -> None:
        self._check_field(name)
        if name in TOGGLE_FIELDS:
            value = bool(value)
        else:
            value = "" if value is None else str(value)

        old = getattr(self._settings, name)
        if old == value:
            return
        setattr(self._settings, name, value)
        self._publish(name, old, value)

    def toggle(self, name: str) -> bool:
        if name not in TOGGLE_FIELDS:
            self._check_field(name)
            raise ValueError(f"'{name}' is not a toggle field")
        new_value = not getattr(self._settings, name)
        self.set(name, new_value)
        return new_value

    def snapshot(self) -> Settings:
        """Return a detached copy of the current settings."""
        return replace(self._settings)

    def to_dict(self) -> dict:
        return asdict(self._settings)

    @staticmethod
    def _check_field(name: str) -> None:
        if name not in SETTINGS_FIELDS:
            raise KeyError(f"Unknown settings field: {name}")


class UserProfileModel(_Observable):
    """Display name and profile image reference for the signed-in user."""

    def __init__(self, profile: UserProfile | None = None) -> None:
        super().__init__()
        self._profile = replace(profile) if profile is not None else UserProfile()

    @property
    def name(self) -> str:
        return self._profile.name

    @property
    def image_reference(self) -> str | None:
        return self._profile.image_reference

    def update(self, *, name: str | None = None, image_reference: str | None = None, clear_image: bool = False) -> None:
        if name is not None and name != self._profile.name:
            old = self._profile.name
            self._profile.name = name
            self._publish("name", old, name)

        if clear_image:
            image_reference = None
        elif image_reference is None:
            return
        elif not image_reference.strip():
            image_reference = None

        if image_reference != self._profile.image_reference:
            old = self._profile.image_reference
            self._profile.image_reference = image_reference
            self._publish("image_reference", old, image_reference)

    def snapshot(self) -> UserProfile:
        return replace(self._profile)

    def to_dict(self) -> dict:
        return asdict(self._profile)


def log_change(name: str, old: Any, new: Any) -> None:
    """Store listener that records every committed change."""
    if name == "password":
        old, new = PASSWORD_MASK, PASSWORD_MASK
    logger.info("%s changed: %r -> %r", name, old, new)
