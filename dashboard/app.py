
import os

import pandas as pd
import pydeck as pdk
import streamlit as st

from dotenv import load_dotenv
load_dotenv()

from globe.client import fetch_events
from globe.controller import GlobeController
from globe.display import legend_rows
from globe.progress import caption
from globe.regions import region_names
from globe.stats import EMPTY as EMPTY_STATS

st.set_page_config(page_title="Global Earthquake Monitor", layout="wide")

EARTH_RADIUS_M = 6_371_000
DEGREE_M = 111_320

# ------------------------
# Config
# ------------------------
DEFAULT_API_BASE = os.getenv("API_BASE_URL", "http://localhost:3001")
st.sidebar.title("⚙️ Settings")
api_base = st.sidebar.text_input("API Base URL", value=DEFAULT_API_BASE, help=f"Proxy base URL {DEFAULT_API_BASE}")


def get_controller(api_base: str) -> GlobeController:
    """One controller per browser session; a new API base supersedes the old one."""
    ctrl = st.session_state.get("controller")
    if ctrl is None or st.session_state.get("api_base") != api_base:
        if ctrl is not None:
            ctrl.close()
        ctrl = GlobeController(fetch=lambda: fetch_events(api_base))
        ctrl.load()
        st.session_state["controller"] = ctrl
        st.session_state["api_base"] = api_base
    return ctrl


ctrl = get_controller(api_base)
state = ctrl.state

theme = state.theme_config
st.markdown(f"<style>.stApp {{background-color: {theme['background_color']};}}</style>", unsafe_allow_html=True)


# ------------------------
# Loading / error screens
# ------------------------
if state.loading:
    @st.fragment(run_every=0.1)
    def loading_screen():
        s = ctrl.state
        if not s.loading:
            st.rerun()
        st.markdown("### 🌍 Loading Earthquake Data")
        st.progress(int(s.progress), text=f"{round(s.progress)}%")
        st.caption(caption(s.progress))

    loading_screen()
    st.stop()

if state.error:
    st.error(f"⚠️ {state.error}")
    if st.button("Retry"):
        ctrl.retry()
        st.rerun()
    st.stop()


# ------------------------
# Filters
# ------------------------
def _sync(field, value, current):
    if value != current:
        ctrl.set_filter(field, value)


f = state.filters
st.sidebar.markdown("---")
st.sidebar.subheader("🎛️ Filter Controls")

mag_min, mag_max = st.sidebar.slider(
    "Magnitude Range",
    min_value=1.0, max_value=10.0,
    value=(float(f.min_magnitude), float(f.max_magnitude)),
    step=0.1,
)
_sync("min_magnitude", mag_min, f.min_magnitude)
_sync("max_magnitude", mag_max, f.max_magnitude)

dates = st.sidebar.date_input(
    "📅 Date Range",
    value=tuple(d for d in (f.start_date, f.end_date) if d is not None),
)
# the picker hands back a 1-tuple while the user is mid-selection
if isinstance(dates, (tuple, list)) and len(dates) == 2:
    _sync("start_date", dates[0], f.start_date)
    _sync("end_date", dates[1], f.end_date)

names = region_names()
region = st.sidebar.selectbox(
    "🌍 Region",
    options=list(names),
    index=list(names).index(f.region),
    format_func=names.get,
)
_sync("region", region, f.region)

search = st.sidebar.text_input("🔍 Search Location", value=f.search_term, placeholder="e.g., Japan, California, Alaska...")
_sync("search_term", search, f.search_term)

st.sidebar.caption("⚡ Quick Filters")
q1, q2, q3 = st.sidebar.columns(3)
for col, label, preset in ((q1, "Major 6.0+", "major"), (q2, "Last 24h", "last-24h"), (q3, "Reset All", "reset")):
    if col.button(label, use_container_width=True):
        ctrl.apply_preset(preset)
        st.rerun()

st.sidebar.markdown("---")
if st.sidebar.button("☀️ Light Mode" if state.theme == "dark" else "🌙 Dark Mode"):
    ctrl.toggle_theme()
    st.rerun()

state = ctrl.state


# ------------------------
# UI/UX
# ------------------------
st.title("🌍 Global Earthquake Monitor")
st.caption("Real-time earthquake data from USGS. Showing magnitude 4.5+ from last 30 days.")

running = state.animation.running
if st.button("⏹️ Stop" if running else "▶️ Animate", disabled=not state.filtered):
    if running:
        ctrl.stop_animation()
    else:
        ctrl.start_animation()
    st.rerun()


def to_dataframe(s):
    if not s.display_events:
        return pd.DataFrame(columns=["id", "magnitude", "place", "timeString", "lat", "lng", "depth"])
    df = pd.DataFrame([e.model_dump() for e in s.display_events])
    df["_elev"] = [s.elevation(e) * EARTH_RADIUS_M for e in s.display_events]
    df["_radius"] = df["size"] * DEGREE_M
    df["_color"] = df["color"].apply(lambda c: [int(c[i:i + 2], 16) for i in (1, 3, 5)])
    return df


def build_deck(s, df):
    layers = [
        pdk.Layer(
            "BitmapLayer",
            id="earth",
            image="https:" + s.theme_config["globe_image_url"],
            bounds=[-180, -90, 180, 90],
        ),
        pdk.Layer(
            "ColumnLayer",
            id="earthquakes",
            data=df,
            get_position="[lng, lat]",
            get_elevation="_elev",
            radius=20000,
            get_fill_color="_color",
            pickable=True,
            auto_highlight=True,
        ),
        pdk.Layer(
            "ScatterplotLayer",
            id="earthquake-points",
            data=df,
            get_position="[lng, lat]",
            get_radius="_radius",
            get_fill_color="_color",
            pickable=True,
            radius_min_pixels=2,
        ),
    ]
    return pdk.Deck(
        views=[pdk.View(type="_GlobeView", controller=True)],
        initial_view_state=pdk.ViewState(latitude=20, longitude=0, zoom=0.8),
        layers=layers,
        map_provider=None,
        tooltip={"text": "{label}"},
    )


@st.fragment(run_every=0.1 if running else None)
def globe_panel():
    s = ctrl.state
    # the reveal finished on its own: refresh the whole page (button label)
    if running and not s.animation.running:
        st.rerun()

    left, right = st.columns([1, 3])
    df = to_dataframe(s)

    with left:
        st.subheader("📊 Real-time Statistics")
        stats = s.stats() or EMPTY_STATS
        st.metric("Total", stats.total)
        st.metric("Last 24h", stats.last_24h)
        st.metric("Avg Mag", f"{stats.avg_magnitude:.1f}")
        st.metric("Max Mag", f"{stats.max_magnitude:.1f}")
        st.caption(f"Range: {stats.min_magnitude:.1f} - {stats.max_magnitude:.1f}")

        st.markdown(f"Showing {len(s.display_events)} of {len(s.events)} earthquakes")
        if s.animation.running:
            st.caption(f"🎬 Animation: {s.animation.index}/{len(s.filtered)}")

        st.markdown("**🌍 Earthquake Magnitude Scale**")
        for color, text in legend_rows():
            st.markdown(f"<span style='color:{color}'>●</span> {text}", unsafe_allow_html=True)
        st.caption("Select a point to see its height")

    with right:
        event = st.pydeck_chart(
            build_deck(s, df),
            on_select="rerun",
            selection_mode="single-object",
            key="globe",
        )
        picked = event.selection.get("objects", {}) if event else {}
        chosen = (picked.get("earthquakes") or picked.get("earthquake-points") or [None])[0]
        chosen_id = chosen.get("id") if chosen else None
        if chosen_id != s.hovered_id:
            ctrl.hover(chosen_id)
            st.rerun(scope="fragment")
        if chosen and chosen.get("url"):
            st.link_button(f"Open {chosen.get('title') or chosen_id} on USGS", chosen["url"])


globe_panel()

st.subheader("Table")
st.dataframe(to_dataframe(ctrl.state).drop(columns=["_elev", "_radius", "_color"], errors="ignore"), use_container_width=True)

st.caption("Data source: USGS Earthquake Hazards Program, via the quake-globe proxy.")
