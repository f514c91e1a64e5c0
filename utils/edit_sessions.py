"""
Edit sessions for the settings modals.

A session lives exactly as long as its modal: it seeds a draft from the
stores when created, and either commits the draft (``save``) or drops it
(``cancel``). Once closed, a session never writes again.
"""

from datetime import date, datetime

from data_model import BIRTHDAY_FORMAT, DEFAULT_GENDER, GENDER_OPTIONS, WEIGHT_UNIT
from utils.log import get_logger
from utils.settings_store import SettingsStore, UserProfileModel

logger = get_logger(__name__)

MAX_WEIGHT = 1000.0


def parse_birthday(raw: str, today: date | None = None) -> date:
    """Parse a stored birthday string, falling back to today's date."""
    try:
        return datetime.strptime(raw, BIRTHDAY_FORMAT).date()
    except (TypeError, ValueError):
        logger.debug("Unparseable birthday %r, defaulting to today", raw)
        return today or date.today()


def format_birthday(value: date) -> str:
    return value.strftime(BIRTHDAY_FORMAT)


class EditSession:
    """Base class for a single open edit modal."""

    title = "Edit"

    def __init__(self) -> None:
        self.closed = False
        self.saved = False

    @property
    def validation_error(self) -> str | None:
        return None

    @property
    def can_save(self) -> bool:
        return not self.closed and self.validation_error is None

    def save(self) -> bool:
        """
        Commit the draft if it is valid.

        Returns False (and changes nothing) when the draft is invalid or the
        session is already closed.
        """
        if not self.can_save:
            return False
        self._commit()
        self.closed = True
        self.saved = True
        return True

    def cancel(self) -> None:
        self.closed = True

    def _commit(self) -> None:
        raise NotImplementedError


class BirthdayEditSession(EditSession):
    title = "Edit Birthday"

    def __init__(self, settings: SettingsStore, today: date | None = None) -> None:
        super().__init__()
        self._settings = settings
        self.draft = parse_birthday(settings.birthday, today=today)

    def _commit(self) -> None:
        self._settings.set("birthday", format_birthday(self.draft))


class GenderEditSession(EditSession):
    title = "Edit Gender"
    options = GENDER_OPTIONS

    def __init__(self, settings: SettingsStore) -> None:
        super().__init__()
        self._settings = settings
        current = settings.gender
        self._draft = current if current in GENDER_OPTIONS else DEFAULT_GENDER

    @property
    def draft(self) -> str:
        return self._draft

    @draft.setter
    def draft(self, value: str) -> None:
        if value not in GENDER_OPTIONS:
            raise ValueError(f"Unsupported gender option: {value!r}")
        self._draft = value

    def _commit(self) -> None:
        self._settings.set("gender", self._draft)


class UsernameEditSession(EditSession):
    title = "Edit Username"

    def __init__(self, settings: SettingsStore) -> None:
        super().__init__()
        self._settings = settings
        self.draft = settings.username

    def _commit(self) -> None:
        self._settings.set("username", self.draft)


class PasswordEditSession(EditSession):
    title = "Edit Password"

    def __init__(self, settings: SettingsStore) -> None:
        super().__init__()
        self._settings = settings
        # Never pre-filled with the stored password
        self.new_password = ""
        self.confirm_password = ""
        self.new_visible = False
        self.confirm_visible = False

    @property
    def validation_error(self) -> str | None:
        if not self.new_password:
            return "Password cannot be empty."
        if self.new_password != self.confirm_password:
            return "Passwords do not match."
        return None

    def toggle_new_visible(self) -> bool:
        self.new_visible = not self.new_visible
        return self.new_visible

    def toggle_confirm_visible(self) -> bool:
        self.confirm_visible = not self.confirm_visible
        return self.confirm_visible

    def _commit(self) -> None:
        self._settings.set("password", self.new_password)
        self.new_password = ""
        self.confirm_password = ""

    def cancel(self) -> None:
        super().cancel()
        self.new_password = ""
        self.confirm_password = ""


class WeightEditSession(EditSession):
    title = "Edit Weight"

    def __init__(self, settings: SettingsStore) -> None:
        super().__init__()
        self._settings = settings
        self.draft = settings.weight

    @property
    def validation_error(self) -> str | None:
        message = f"Enter a weight between 0 and {MAX_WEIGHT:g} {WEIGHT_UNIT}."
        try:
            value = float(self.draft.strip())
        except (AttributeError, ValueError):
            return message
        if not 0 < value <= MAX_WEIGHT:
            return message
        return None

    def _commit(self) -> None:
        value = self.draft.strip()
        # Whitespace-only differences from the stored weight are not an edit
        if value != self._settings.weight.strip():
            self._settings.set("weight", value)


class ProfileEditSession(EditSession):
    title = "Edit Profile"

    def __init__(self, profile: UserProfileModel) -> None:
        super().__init__()
        self._profile = profile
        self.name = profile.name
        self.image_reference = profile.image_reference or ""

    def _commit(self) -> None:
        self._profile.update(
            name=self.name,
            clear_image=not self.image_reference.strip(),
            image_reference=self.image_reference.strip() or None,
        )
