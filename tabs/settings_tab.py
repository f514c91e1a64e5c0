# tabs/settings_tab.py
from datetime import date

import streamlit as st

from clients.image_loader import load_profile_image
from utils.edit_sessions import (
    BirthdayEditSession,
    GenderEditSession,
    PasswordEditSession,
    ProfileEditSession,
    UsernameEditSession,
    WeightEditSession,
)
from utils.settings_controller import ActiveModal, SettingsController
from utils.settings_rows import ACCOUNT_ROWS, SETTINGS_ROWS, EditableRow, ToggleRow

BIRTHDAY_MIN = date(1900, 1, 1)


def _commit_toggle(controller: SettingsController, field: str, key: str):
    controller.set_toggle(field, st.session_state[key])


def _render_toggle_row(controller: SettingsController, row: ToggleRow):
    key = f"toggle_{row.field}"
    # Keep the widget in sync with the store (e.g. after a new session starts)
    st.session_state[key] = row.value(controller.settings)
    st.toggle(
        f"{row.icon} {row.label}",
        key=key,
        on_change=_commit_toggle,
        args=(controller, row.field, key),
    )


def _render_editable_row(controller: SettingsController, row: EditableRow):
    c_label, c_value, c_edit = st.columns([3, 3, 1])
    with c_label:
        st.write(f"{row.icon} {row.label}")
    with c_value:
        st.caption(row.display_value(controller.settings))
    with c_edit:
        st.button("✏️", key=f"edit_{row.field}", on_click=controller.open, args=(row.target,))


def _render_rows(controller: SettingsController, rows):
    for row in rows:
        if isinstance(row, ToggleRow):
            _render_toggle_row(controller, row)
        else:
            _render_editable_row(controller, row)


def _editor_footer(controller: SettingsController):
    session = controller.session
    if session.validation_error:
        st.caption(session.validation_error)
    if st.button("Save", key="editor_save", disabled=not session.can_save, type="primary"):
        if controller.save():
            st.rerun()


def _render_editor(controller: SettingsController):
    session = controller.session
    suffix = controller.open_count

    st.button("‹ Back", key="editor_back", on_click=controller.cancel)
    st.header(session.title)

    if isinstance(session, BirthdayEditSession):
        session.draft = st.date_input(
            "Select Birthday",
            value=session.draft,
            min_value=min(BIRTHDAY_MIN, session.draft),
            max_value=max(date.today(), session.draft),
            key=f"birthday_{suffix}",
        )

    elif isinstance(session, GenderEditSession):
        session.draft = st.radio(
            "Select your gender",
            session.options,
            index=session.options.index(session.draft),
            key=f"gender_{suffix}",
        )

    elif isinstance(session, UsernameEditSession):
        session.draft = st.text_input("Enter your username", value=session.draft, key=f"username_{suffix}")

    elif isinstance(session, WeightEditSession):
        session.draft = st.text_input("Weight (lbs)", value=session.draft, key=f"weight_{suffix}")

    elif isinstance(session, PasswordEditSession):
        c_new, c_new_eye = st.columns([5, 1])
        with c_new:
            session.new_password = st.text_input(
                "Enter your new password",
                type="default" if session.new_visible else "password",
                key=f"password_new_{suffix}",
            )
        with c_new_eye:
            st.button("👁️" if session.new_visible else "🙈", key="password_new_eye", on_click=session.toggle_new_visible)

        c_confirm, c_confirm_eye = st.columns([5, 1])
        with c_confirm:
            session.confirm_password = st.text_input(
                "Confirm your new password",
                type="default" if session.confirm_visible else "password",
                key=f"password_confirm_{suffix}",
            )
        with c_confirm_eye:
            st.button(
                "👁️" if session.confirm_visible else "🙈",
                key="password_confirm_eye",
                on_click=session.toggle_confirm_visible,
            )

    elif isinstance(session, ProfileEditSession):
        session.name = st.text_input("Name", value=session.name, key=f"profile_name_{suffix}")
        session.image_reference = st.text_input(
            "Profile image",
            value=session.image_reference,
            key=f"profile_image_{suffix}",
            help="Image file name inside the configured image folder. Leave blank to use the default image.",
        )

    _editor_footer(controller)


def render(controller: SettingsController, image_loader):
    if controller.active_modal is not ActiveModal.NONE:
        _render_editor(controller)
        return

    profile = controller.profile
    c_img, c_name = st.columns([1, 3])
    with c_img:
        st.image(load_profile_image(profile.snapshot(), image_loader), width=100)
        st.button("✏️", key="edit_profile", on_click=controller.open, args=(ActiveModal.PROFILE,))
    with c_name:
        st.subheader(profile.name or "Unnamed")

    st.header("Settings")
    _render_rows(controller, SETTINGS_ROWS)

    st.header("Account")
    _render_rows(controller, ACCOUNT_ROWS)

    st.button("LOGOUT", key="logout", on_click=controller.logout, type="primary")
