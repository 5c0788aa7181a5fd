"""Display attributes derived from magnitude: point colour, radius, tooltip, height."""
from datetime import datetime, timezone

from schemas.models import EarthquakeEvent

# (lower bound, colour, name), checked top-down
LEGEND = [
    (7.0, "#ff0000", "Major"),
    (6.0, "#ff4500", "Strong"),
    (5.0, "#ff8c00", "Moderate"),
    (4.0, "#ffd700", "Light"),
]
MINOR_COLOR = "#90ee90"

SIZE_FACTOR = 0.15
MIN_SIZE = 0.15
ELEVATION_FACTOR = 0.02
MIN_ELEVATION = 0.02


class EnrichedEvent(EarthquakeEvent):
    color: str
    size: float
    label: str


def _mag(magnitude):
    return magnitude if magnitude is not None else 0.0


def magnitude_color(magnitude) -> str:
    m = _mag(magnitude)
    for low, color, _ in LEGEND:
        if m >= low:
            return color
    return MINOR_COLOR


def magnitude_size(magnitude) -> float:
    return max(MIN_SIZE, _mag(magnitude) * SIZE_FACTOR)


def legend_rows():
    """[(colour, caption)] for the magnitude scale panel."""
    rows = []
    upper = None
    for low, color, name in LEGEND:
        span = f"{low:.1f}+" if upper is None else f"{low:.1f}-{upper - 0.1:.1f}"
        rows.append((color, f"{span} {name}"))
        upper = low
    rows.append((MINOR_COLOR, f"<{upper:.1f} Minor"))
    return rows


def _local_time(ms):
    if ms is None:
        return "unknown"
    dt = datetime.fromtimestamp(ms / 1000, tz=timezone.utc).astimezone()
    return dt.strftime("%Y-%m-%d %H:%M:%S %Z")


def point_label(event) -> str:
    magnitude = event.magnitude if event.magnitude is not None else "unknown"
    return (
        f"{event.place}\n"
        f"Magnitude: {magnitude}\n"
        f"Depth: {event.depth}km\n"
        f"Time: {_local_time(event.time)}"
    )


def enrich(event: EarthquakeEvent) -> EnrichedEvent:
    """Copy of ``event`` with colour, size and label attached."""
    return EnrichedEvent(
        **event.model_dump(),
        color=magnitude_color(event.magnitude),
        size=magnitude_size(event.magnitude),
        label=point_label(event),
    )


def point_elevation(event, hovered_id) -> float:
    # flat unless hovered
    if event is None or hovered_id is None or event.id != hovered_id:
        return 0.0
    return max(MIN_ELEVATION, _mag(event.magnitude) * ELEVATION_FACTOR)
