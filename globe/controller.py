"""
Owns one globe page's state and the timers that drive it.

The controller is the only place where the pure reducer meets the outside
world: the background fetch, the simulated progress bar and the reveal
animation. Both timers are cancelled when superseded and on ``close()``.
"""
import logging
import threading
import time
from datetime import datetime, timezone

from globe import animation, progress
from globe.client import FetchError, fetch_events
from globe.state import (
    AnimationTick, ApplyPreset, FetchFailed, FetchStarted, FetchSucceeded, Hover,
    ProgressTick, SetFilter, StartAnimation, StopAnimation, ToggleTheme,
    initial_state, reduce,
)
from globe.timers import PeriodicTimer

logger = logging.getLogger(__name__)


def utc_today():
    return datetime.now(timezone.utc).date()


class GlobeController:
    def __init__(self, fetch=fetch_events, today=utc_today, clock=time.monotonic,
                 increment=progress.random_increment,
                 progress_interval=progress.TICK_SECONDS,
                 animation_interval=animation.TICK_SECONDS,
                 min_loading_seconds=progress.MIN_LOADING_SECONDS):
        self.fetch = fetch
        self.today = today
        self.clock = clock
        self.increment = increment
        self.progress_interval = progress_interval
        self.animation_interval = animation_interval
        self.min_loading_seconds = min_loading_seconds

        self._lock = threading.Lock()
        self._state = initial_state(today())
        self._progress_timer = None
        self._animation_timer = None
        self._fetch_thread = None
        self._load_started = None
        self._min_seconds = min_loading_seconds

    @property
    def state(self):
        return self._state

    def dispatch(self, action):
        with self._lock:
            self._state = reduce(self._state, action)
            return self._state

    # ---------- Loading ----------
    def load(self, min_seconds=None):
        """Start the fetch in the background and the simulated progress bar."""
        self._cancel_progress()
        self._min_seconds = self.min_loading_seconds if min_seconds is None else min_seconds
        self.dispatch(FetchStarted())
        self._load_started = self.clock()

        self._fetch_thread = threading.Thread(target=self._fetch, name="globe-fetch", daemon=True)
        self._fetch_thread.start()
        self._progress_timer = PeriodicTimer(
            self.progress_interval, self._progress_tick, name="globe-progress"
        ).start()

    def retry(self):
        # same request, no backoff; the bar closes as soon as data arrives
        self.load(min_seconds=0)

    def _fetch(self):
        try:
            events = self.fetch()
        except FetchError as e:
            logger.error("Error fetching earthquake data: %s", e)
            self.dispatch(FetchFailed(str(e)))
            return
        logger.info("Processed %d earthquakes", len(events))
        self.dispatch(FetchSucceeded(tuple(events)))

    def _progress_tick(self):
        elapsed = self.clock() - self._load_started
        state = self.dispatch(ProgressTick(self.increment(), elapsed, self._min_seconds))
        return state.loading

    def wait_for_fetch(self, timeout=None):
        if self._fetch_thread is not None:
            self._fetch_thread.join(timeout)

    # ---------- Animation ----------
    def start_animation(self):
        self._cancel_animation()
        state = self.dispatch(StartAnimation())
        if state.animation.running:
            self._animation_timer = PeriodicTimer(
                self.animation_interval, self._animation_tick, name="globe-animation"
            ).start()
        return state

    def _animation_tick(self):
        return self.dispatch(AnimationTick()).animation.running

    def stop_animation(self):
        self._cancel_animation()
        return self.dispatch(StopAnimation())

    # ---------- Interaction ----------
    def set_filter(self, field, value):
        return self.dispatch(SetFilter(field, value))

    def apply_preset(self, name):
        return self.dispatch(ApplyPreset(name, self.today()))

    def hover(self, event_id):
        return self.dispatch(Hover(event_id))

    def toggle_theme(self):
        return self.dispatch(ToggleTheme())

    # ---------- Teardown ----------
    def _cancel_progress(self):
        if self._progress_timer is not None:
            self._progress_timer.cancel()
            self._progress_timer = None

    def _cancel_animation(self):
        if self._animation_timer is not None:
            self._animation_timer.cancel()
            self._animation_timer = None

    def close(self):
        self._cancel_progress()
        self._cancel_animation()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
