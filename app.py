import streamlit as st

# ---- Local modules ----
from clients.image_loader import LocalImageLoader
from clients.settings_seed import load_settings_seed, seed_section
from data_model import profile_from_mapping, settings_from_mapping
from tabs import home_tab, settings_tab
from utils.home_state import HomeState
from utils.log import get_logger, setup_logging
from utils.secrets import load_app_config
from utils.settings_controller import SettingsController
from utils.settings_store import SettingsStore, UserProfileModel, log_change

logger = get_logger(__name__)

# Session keys owned by a signed-in session; cleared on logout
SESSION_KEYS = ("settings_store", "profile_model", "settings_controller", "home_state")


def _request_logout():
    st.session_state["authenticated"] = False


def start_session(config) -> None:
    """Build the shared stores for a new signed-in session."""
    seed = load_settings_seed(config.settings_path)

    settings = SettingsStore(settings_from_mapping(seed_section(seed, "settings")))
    profile = UserProfileModel(profile_from_mapping(seed_section(seed, "profile"), default_name=config.user_name))
    settings.subscribe(log_change)
    profile.subscribe(log_change)

    st.session_state["settings_store"] = settings
    st.session_state["profile_model"] = profile
    st.session_state["settings_controller"] = SettingsController(settings, profile, on_logout=_request_logout)
    st.session_state["home_state"] = HomeState()
    st.session_state["authenticated"] = True
    logger.info("Session started for %s", profile.name or "unnamed user")


def end_session() -> None:
    for key in SESSION_KEYS:
        st.session_state.pop(key, None)
    # Widget state of the settings screen belongs to the old session too
    for key in [k for k in st.session_state.keys() if str(k).startswith("toggle_")]:
        del st.session_state[key]
    logger.info("Session ended")


def render_launch(config):
    st.title("LiftLog")
    st.info("You are logged out.")
    if st.button("Log in", key="login"):
        start_session(config)
        st.rerun()


# =========================================================
# UI
# =========================================================
def main():
    config = load_app_config()
    setup_logging(config.log_level)

    if "authenticated" not in st.session_state:
        start_session(config)

    if not st.session_state["authenticated"]:
        if "settings_store" in st.session_state:
            end_session()
        render_launch(config)
        return

    image_loader = LocalImageLoader(config.image_dir)

    st.title("LiftLog")
    home_tab_ui, settings_tab_ui = st.tabs(["Home", "Settings"])

    with home_tab_ui:
        home_tab.render(st.session_state["home_state"], st.session_state["profile_model"], image_loader)

    with settings_tab_ui:
        settings_tab.render(st.session_state["settings_controller"], image_loader)


if __name__ == '__main__':
    main()
