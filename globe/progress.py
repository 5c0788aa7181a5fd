"""Simulated loading bar shown while the first fetch is outstanding."""
import random

TICK_SECONDS = 0.1
MIN_LOADING_SECONDS = 5.0
CAP_BEFORE_LOADED = 95.0
MIN_STEP, MAX_STEP = 1.0, 4.0


def random_increment():
    return random.uniform(MIN_STEP, MAX_STEP)


def advance(progress, increment, loaded, elapsed, min_seconds=MIN_LOADING_SECONDS):
    """
    Returns (progress, done). The bar creeps towards 95% and only jumps to
    100% once data has arrived and the minimum display time has passed.
    """
    if loaded and elapsed >= min_seconds:
        return 100.0, True
    return min(progress + increment, CAP_BEFORE_LOADED), False


def caption(progress):
    if progress < 30:
        return "Connecting to USGS API..."
    if progress < 60:
        return "Fetching earthquake data..."
    if progress < 90:
        return "Processing coordinates..."
    return "Preparing visualization..."
