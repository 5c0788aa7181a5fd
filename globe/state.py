"""
View state for the globe page.

Every user interaction, timer tick and fetch outcome is an action; ``reduce``
turns (state, action) into the next immutable ``ViewState``. Nothing in here
touches the network, the clock or a timer, so it can be driven from tests,
from the controller's timers or from the Streamlit script alike.
"""
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional, Tuple

from globe import animation as anim, progress
from globe.display import enrich, point_elevation
from globe.filters import FilterState, apply_filters, apply_preset, default_filters, update_filter
from globe.stats import statistics

_TEXTURES = "//unpkg.com/three-globe/example/img"

THEMES = {
    "dark": {
        "globe_image_url": f"{_TEXTURES}/earth-blue-marble.jpg",
        "bump_image_url": f"{_TEXTURES}/earth-topology.png",
        "background_image_url": f"{_TEXTURES}/night-sky.png",
        "background_color": "#000011",
        "atmosphere_color": "#87ceeb",
    },
    "light": {
        "globe_image_url": f"{_TEXTURES}/earth-day.jpg",
        "bump_image_url": f"{_TEXTURES}/earth-topology.png",
        "background_image_url": None,
        "background_color": "#87ceeb",
        "atmosphere_color": "#4a90e2",
    },
}


# ---------- Actions ----------
@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class FetchSucceeded:
    events: tuple


@dataclass(frozen=True)
class FetchFailed:
    message: str


@dataclass(frozen=True)
class ProgressTick:
    increment: float
    elapsed: float
    min_seconds: float = progress.MIN_LOADING_SECONDS


@dataclass(frozen=True)
class SetFilter:
    field: str
    value: object


@dataclass(frozen=True)
class ApplyPreset:
    name: str
    today: date


@dataclass(frozen=True)
class Hover:
    event_id: Optional[str]


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class StartAnimation:
    pass


@dataclass(frozen=True)
class AnimationTick:
    pass


@dataclass(frozen=True)
class StopAnimation:
    pass


# ---------- State ----------
@dataclass(frozen=True)
class ViewState:
    filters: FilterState = field(default_factory=FilterState)
    events: Tuple = ()
    filtered: Tuple = ()
    hovered_id: Optional[str] = None
    animation: anim.AnimationState = anim.STOPPED
    theme: str = "dark"
    loading: bool = True
    progress: float = 0.0
    loaded: bool = False
    error: Optional[str] = None

    @property
    def display_events(self):
        return anim.visible(self.filtered, self.animation)

    @property
    def theme_config(self):
        return THEMES[self.theme]

    def stats(self, now: Optional[datetime] = None):
        return statistics(self.display_events, now)

    def elevation(self, event) -> float:
        return point_elevation(event, self.hovered_id)


def initial_state(today: date) -> ViewState:
    return ViewState(filters=default_filters(today))


def _refilter(state: ViewState, **changes) -> ViewState:
    # events or filters changed: recompute everything, drop any running reveal
    state = replace(state, **changes)
    return replace(
        state,
        filtered=tuple(apply_filters(state.events, state.filters)),
        animation=anim.STOPPED,
    )


def reduce(state: ViewState, action) -> ViewState:
    if isinstance(action, FetchStarted):
        return replace(state, loading=True, progress=0.0, loaded=False, error=None)

    if isinstance(action, FetchSucceeded):
        events = tuple(enrich(e) for e in action.events)
        return _refilter(state, events=events, loaded=True, error=None)

    if isinstance(action, FetchFailed):
        return replace(state, loaded=True, error=action.message)

    if isinstance(action, ProgressTick):
        if not state.loading:
            return state
        value, done = progress.advance(
            state.progress, action.increment, state.loaded, action.elapsed, action.min_seconds
        )
        return replace(state, progress=value, loading=not done)

    if isinstance(action, SetFilter):
        return _refilter(state, filters=update_filter(state.filters, action.field, action.value))

    if isinstance(action, ApplyPreset):
        return _refilter(state, filters=apply_preset(state.filters, action.name, action.today))

    if isinstance(action, Hover):
        return replace(state, hovered_id=action.event_id)

    if isinstance(action, ToggleTheme):
        return replace(state, theme="light" if state.theme == "dark" else "dark")

    if isinstance(action, StartAnimation):
        return replace(state, animation=anim.start(state.animation, len(state.filtered)))

    if isinstance(action, AnimationTick):
        return replace(state, animation=anim.tick(state.animation, len(state.filtered)))

    if isinstance(action, StopAnimation):
        return replace(state, animation=anim.stop(state.animation))

    raise TypeError(f"Unknown action {action!r}")
