# utils/settings_rows.py
from dataclasses import dataclass

from data_model import PASSWORD_MASK, WEIGHT_UNIT
from utils.settings_controller import ActiveModal
from utils.settings_store import SettingsStore


@dataclass(frozen=True)
class ToggleRow:
    icon: str
    label: str
    field: str

    def value(self, store: SettingsStore) -> bool:
        return store.get(self.field)


@dataclass(frozen=True)
class EditableRow:
    icon: str
    label: str
    field: str
    target: ActiveModal

    def display_value(self, store: SettingsStore) -> str:
        if self.field == "password":
            return PASSWORD_MASK
        value = store.get(self.field)
        if self.field == "weight":
            return f"{value} {WEIGHT_UNIT}"
        return value


SETTINGS_ROWS = (
    ToggleRow("👁️", "Profile Public", "profile_public"),
    ToggleRow("📤", "Auto Share Workouts", "auto_share_workouts"),
    ToggleRow("🔔", "Notifications", "notifications"),
    ToggleRow("🛏️", "Rest Day Reminders", "rest_day_reminders"),
    ToggleRow("💧", "Water Intake Reminders", "water_intake_reminders"),
    ToggleRow("🔔", "Daily Workout Reminders", "workout_reminders"),
    EditableRow("🏋️", "Weight", "weight", ActiveModal.WEIGHT),
    EditableRow("👤", "Gender", "gender", ActiveModal.GENDER),
)

ACCOUNT_ROWS = (
    EditableRow("🎂", "Birthday", "birthday", ActiveModal.BIRTHDAY),
    EditableRow("👤", "Username", "username", ActiveModal.USERNAME),
    EditableRow("🔒", "Password", "password", ActiveModal.PASSWORD),
)
