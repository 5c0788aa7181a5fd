from dataclasses import dataclass, fields, replace
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from globe.regions import REGIONS, in_region

DEFAULT_MIN_MAGNITUDE = 4.5
DEFAULT_MAX_MAGNITUDE = 10.0
DEFAULT_WINDOW_DAYS = 30

PRESETS = ("major", "last-24h", "reset")


@dataclass(frozen=True)
class FilterState:
    min_magnitude: float = DEFAULT_MIN_MAGNITUDE
    max_magnitude: float = DEFAULT_MAX_MAGNITUDE
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    region: str = "all"
    search_term: str = ""


def default_filters(today: date) -> FilterState:
    return FilterState(
        start_date=today - timedelta(days=DEFAULT_WINDOW_DAYS),
        end_date=today,
    )


def update_filter(filters: FilterState, field: str, value) -> FilterState:
    """Return a copy of ``filters`` with one field changed."""
    if field not in {f.name for f in fields(FilterState)}:
        raise ValueError(f"Unknown filter field '{field}'")
    if field == "region" and value not in REGIONS:
        raise ValueError(f"Unknown region '{value}'. Choose from: {list(REGIONS)}")
    return replace(filters, **{field: value})


def apply_preset(filters: FilterState, name: str, today: date) -> FilterState:
    if name == "major":
        return replace(filters, min_magnitude=6.0)
    if name == "last-24h":
        return replace(filters, start_date=today - timedelta(days=1))
    if name == "reset":
        return default_filters(today)
    raise ValueError(f"Unknown preset '{name}'. Choose from: {list(PRESETS)}")


def _midnight_ms(d: date) -> int:
    # a bare date bound means UTC midnight of that day
    return int(datetime.combine(d, time.min, tzinfo=timezone.utc).timestamp() * 1000)


def _make_predicate(filters: FilterState):
    start_ms = _midnight_ms(filters.start_date) if filters.start_date else None
    end_ms = _midnight_ms(filters.end_date) if filters.end_date else None
    needle = filters.search_term.lower()

    def keep(event) -> bool:
        mag = event.magnitude if event.magnitude is not None else 0.0
        if mag < filters.min_magnitude or mag > filters.max_magnitude:
            return False

        if start_ms is not None and (event.time is None or event.time < start_ms):
            return False
        if end_ms is not None and (event.time is None or event.time > end_ms):
            return False

        if not in_region(event, filters.region):
            return False

        if needle and needle not in (event.place or "").lower():
            return False

        return True

    return keep


def apply_filters(events, filters: FilterState) -> list:
    """All five predicates must pass. Source order is kept."""
    keep = _make_predicate(filters)
    return [e for e in events if keep(e)]
