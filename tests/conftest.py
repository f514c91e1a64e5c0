from datetime import date

import pytest

from data_model import Settings, UserProfile
from utils.settings_controller import SettingsController
from utils.settings_store import SettingsStore, UserProfileModel

TODAY = date(2024, 11, 8)


@pytest.fixture
def settings_store() -> SettingsStore:
    return SettingsStore(
        Settings(
            profile_public=True,
            notifications=True,
            weight="150",
            gender="Female",
            birthday="12/25/1990",
            username="janedoe",
            password="hunter2",
        )
    )


@pytest.fixture
def profile_model() -> UserProfileModel:
    return UserProfileModel(UserProfile(name="Jane Doe", image_reference="jane.png"))


@pytest.fixture
def logout_calls() -> list:
    return []


@pytest.fixture
def controller(settings_store, profile_model, logout_calls) -> SettingsController:
    return SettingsController(
        settings_store,
        profile_model,
        on_logout=lambda: logout_calls.append(True),
        today=lambda: TODAY,
    )
