from data_model import (
    SETTINGS_FIELDS,
    TEXT_FIELDS,
    TOGGLE_FIELDS,
    Settings,
    profile_from_mapping,
    settings_from_mapping,
)


def test_every_field_has_a_value_by_default() -> None:
    settings = Settings()

    for name in TOGGLE_FIELDS:
        assert getattr(settings, name) is False
    for name in TEXT_FIELDS:
        assert getattr(settings, name) == ""
    assert set(SETTINGS_FIELDS) == set(TOGGLE_FIELDS) | set(TEXT_FIELDS)


def test_settings_from_partial_mapping_fills_defaults() -> None:
    settings = settings_from_mapping({"username": "jane", "notifications": 1, "unknown": "x"})

    assert settings.username == "jane"
    assert settings.notifications is True
    assert settings.password == ""
    assert settings.workout_reminders is False


def test_settings_from_mapping_replaces_none_text_with_default() -> None:
    settings = settings_from_mapping({"gender": None, "weight": 150})

    assert settings.gender == ""
    assert settings.weight == "150"


def test_settings_from_empty_mapping() -> None:
    assert settings_from_mapping(None) == Settings()
    assert settings_from_mapping({}) == Settings()


def test_profile_from_mapping_uses_default_name_and_blank_image() -> None:
    profile = profile_from_mapping({"image_reference": ""}, default_name="Jane Doe")

    assert profile.name == "Jane Doe"
    assert profile.image_reference is None


def test_profile_from_mapping_keeps_values() -> None:
    profile = profile_from_mapping({"name": "Sam", "image_reference": "sam.png"})

    assert profile.name == "Sam"
    assert profile.image_reference == "sam.png"
