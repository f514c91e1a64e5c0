from datetime import date
from enum import Enum
from typing import Callable

from data_model import TOGGLE_FIELDS
from utils.edit_sessions import (
    BirthdayEditSession,
    EditSession,
    GenderEditSession,
    PasswordEditSession,
    ProfileEditSession,
    UsernameEditSession,
    WeightEditSession,
)
from utils.log import get_logger
from utils.settings_store import SettingsStore, UserProfileModel

logger = get_logger(__name__)


class ActiveModal(str, Enum):
    NONE = "none"
    PROFILE = "profile"
    WEIGHT = "weight"
    GENDER = "gender"
    BIRTHDAY = "birthday"
    USERNAME = "username"
    PASSWORD = "password"


class SettingsController:
    """
    Owns the settings screen's single modal slot.

    Only one edit session exists at a time. Opening a modal while another is
    open cancels the first, so its draft never reaches the stores.
    """

    def __init__(
        self,
        settings: SettingsStore,
        profile: UserProfileModel,
        on_logout: Callable[[], None] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.settings = settings
        self.profile = profile
        self._on_logout = on_logout
        self._today = today
        self._active = ActiveModal.NONE
        self._session: EditSession | None = None
        # Bumped on every open so views can key widgets per session
        self.open_count = 0

    @property
    def active_modal(self) -> ActiveModal:
        return self._active

    @property
    def session(self) -> EditSession | None:
        return self._session

    def open(self, modal: ActiveModal) -> EditSession | None:
        modal = ActiveModal(modal)
        if self._session is not None:
            logger.debug("Replacing open modal %s with %s", self._active.value, modal.value)
            self._session.cancel()
        self._session = None
        self._active = ActiveModal.NONE
        if modal is ActiveModal.NONE:
            return None

        self._session = self._build_session(modal)
        self._active = modal
        self.open_count += 1
        return self._session

    def cancel(self) -> None:
        if self._session is not None:
            self._session.cancel()
        self._close()

    def save(self) -> bool:
        """Commit the open session; a no-op returning False if it is invalid."""
        if self._session is None:
            return False
        if not self._session.save():
            logger.debug("Save blocked for %s: %s", self._active.value, self._session.validation_error)
            return False
        self._close()
        return True

    def set_toggle(self, name: str, value: bool) -> None:
        if name not in TOGGLE_FIELDS:
            raise ValueError(f"'{name}' is not a toggle field")
        self.settings.set(name, bool(value))

    def toggle(self, name: str) -> bool:
        return self.settings.toggle(name)

    def logout(self) -> None:
        """Close any open modal and hand the logout intent to the host."""
        self.cancel()
        logger.info("Logout requested")
        if self._on_logout is not None:
            self._on_logout()

    def _close(self) -> None:
        self._session = None
        self._active = ActiveModal.NONE

    def _build_session(self, modal: ActiveModal) -> EditSession:
        if modal is ActiveModal.BIRTHDAY:
            return BirthdayEditSession(self.settings, today=self._today())
        if modal is ActiveModal.GENDER:
            return GenderEditSession(self.settings)
        if modal is ActiveModal.USERNAME:
            return UsernameEditSession(self.settings)
        if modal is ActiveModal.PASSWORD:
            return PasswordEditSession(self.settings)
        if modal is ActiveModal.WEIGHT:
            return WeightEditSession(self.settings)
        if modal is ActiveModal.PROFILE:
            return ProfileEditSession(self.profile)
        raise ValueError(f"No editor for {modal!r}")
