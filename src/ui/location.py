import streamlit as st
from ui.map_view import pick_location_on_map
from utils.constants import Keys
from utils.validation import validate_coordinates

# Map centre offered before the user has chosen anything.
FALLBACK_CENTER = {"lat": 51.5074, "lng": -0.1278}


def _set_location(lat: float, lng: float):
    validate_coordinates(lat, lng)
    st.session_state.location = {"lat": lat, "lng": lng}
    st.session_state.nearby_questions = None


def is_new_click(clicked: dict | None, handled: dict | None) -> bool:
    """st_folium repeats its last click on every rerun; only act on fresh ones."""
    return bool(clicked) and clicked != handled


def render_location_picker():
    """Sidebar control for the observer location used by publish and explore."""
    current = st.session_state.location
    st.sidebar.subheader("Your location")
    if current:
        st.sidebar.caption(f"📍 {current['lat']:.5f}, {current['lng']:.5f}")
    else:
        st.sidebar.caption("Location not set")

    with st.sidebar.expander("Set location", expanded=current is None):
        center = current or FALLBACK_CENTER
        with st.form("location_form"):
            lat = st.number_input(
                "Latitude",
                min_value=-90.0,
                max_value=90.0,
                value=float(center["lat"]),
                format="%.5f",
                key=Keys.LATITUDE.value,
            )
            lng = st.number_input(
                "Longitude",
                min_value=-180.0,
                max_value=180.0,
                value=float(center["lng"]),
                format="%.5f",
                key=Keys.LONGITUDE.value,
            )
            if st.form_submit_button("Use these coordinates"):
                try:
                    _set_location(lat, lng)
                    st.rerun()
                except ValueError as e:
                    st.error(str(e))

        st.caption("…or click the map")
        clicked = pick_location_on_map(center["lat"], center["lng"])
        if is_new_click(clicked, st.session_state.handled_map_click):
            st.session_state.handled_map_click = clicked
            _set_location(clicked["lat"], clicked["lng"])
            st.rerun()
