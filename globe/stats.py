from dataclasses import dataclass
from datetime import datetime, timezone

DAY_MS = 24 * 60 * 60 * 1000


@dataclass(frozen=True)
class Statistics:
    total: int
    avg_magnitude: float
    max_magnitude: float
    min_magnitude: float
    last_24h: int


def statistics(events, now=None):
    """Summary of the displayed events; None when there is nothing to show."""
    if not events:
        return None
    if now is None:
        now = datetime.now(timezone.utc)
    now_ms = int(now.timestamp() * 1000)

    mags = [e.magnitude if e.magnitude is not None else 0.0 for e in events]
    last_24h = sum(1 for e in events if e.time is not None and now_ms - e.time < DAY_MS)

    return Statistics(
        total=len(events),
        avg_magnitude=round(sum(mags) / len(mags), 1),
        max_magnitude=round(max(mags), 1),
        min_magnitude=round(min(mags), 1),
        last_24h=last_24h,
    )


# what the panel shows when nothing passes the filters
EMPTY = Statistics(total=0, avg_magnitude=0.0, max_magnitude=0.0, min_magnitude=0.0, last_24h=0)
