import html
import folium
import streamlit as st
from streamlit_folium import st_folium
from typing import List
from models.models import GeoQuestion, ScoredCandidate
from utils.constants import find_subject
from utils.format_utils import format_distance, time_ago
from utils.geo import radius_to_zoom

OSM_ATTRIBUTION = "&copy; OpenStreetMap contributors"


def _base_map(lat: float, lng: float, zoom: int) -> folium.Map:
    return folium.Map(location=[lat, lng], zoom_start=zoom, attr=OSM_ATTRIBUTION)


def _popup_html(question: GeoQuestion) -> str:
    subject = find_subject(question.subject) or {}
    distance = (
        f" · {format_distance(question.distance_m)}"
        if isinstance(question, ScoredCandidate)
        else ""
    )
    thumb = (
        f'<img src="data:image/jpeg;base64,{html.escape(question.thumbnail)}" '
        'style="width:100%;height:100px;object-fit:cover;border-radius:6px"/>'
        if question.thumbnail
        else ""
    )
    return (
        f"<div style='width:240px'>"
        f"<b style='color:{subject.get('color', '#1A1A2E')}'>"
        f"{html.escape(subject.get('icon', ''))} {html.escape(subject.get('label', question.subject))}</b>{distance}"
        f"{thumb}<p>{html.escape(question.question)}</p>"
        f"<small>@{html.escape(question.username)} · {time_ago(question.created_at)}</small></div>"
    )


def render_explore_map(
    lat: float, lng: float, radius_m: float, questions: List[ScoredCandidate], height: int = 360
):
    m = _base_map(lat, lng, radius_to_zoom(radius_m))
    folium.Circle(
        location=[lat, lng],
        radius=radius_m,
        color="#3A6BE8",
        fill=True,
        fill_opacity=0.05,
        weight=1.5,
        dash_array="6 4",
    ).add_to(m)
    folium.CircleMarker(
        location=[lat, lng],
        radius=8,
        color="#ffffff",
        fill=True,
        fill_color="#3A6BE8",
        fill_opacity=1,
        tooltip="You are here",
    ).add_to(m)
    for q in questions:
        subject = find_subject(q.subject) or {}
        folium.Marker(
            location=[q.lat, q.lng],
            popup=folium.Popup(_popup_html(q), max_width=280),
            icon=folium.DivIcon(
                html=(
                    f"<div style='background:{subject.get('color', '#3A6BE8')};color:#fff;"
                    "border-radius:50%;width:28px;height:28px;display:flex;"
                    "align-items:center;justify-content:center;font-weight:bold;"
                    f"border:2px solid #fff'>{subject.get('icon', '?')}</div>"
                ),
                icon_size=(28, 28),
                icon_anchor=(14, 14),
            ),
        ).add_to(m)
    st_folium(m, height=height, use_container_width=True, key="explore_map", returned_objects=[])


def pick_location_on_map(lat: float, lng: float, key: str = "location_map") -> dict | None:
    """Show a map and return the clicked point as {"lat", "lng"}, if any."""
    m = _base_map(lat, lng, 13)
    folium.Marker(location=[lat, lng], tooltip="Current location").add_to(m)
    output = st_folium(
        m, height=260, use_container_width=True, key=key, returned_objects=["last_clicked"]
    )
    clicked = (output or {}).get("last_clicked")
    if clicked:
        return {"lat": clicked["lat"], "lng": clicked["lng"]}
    return None
