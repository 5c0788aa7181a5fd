from datetime import datetime, timezone

from globe.stats import EMPTY, statistics

NOW = datetime(2023, 11, 15, 12, 0, tzinfo=timezone.utc)
NOW_MS = int(NOW.timestamp() * 1000)
HOUR = 60 * 60 * 1000


def test_empty_is_none():
    assert statistics([], NOW) is None


def test_summary(make_event):
    events = [
        make_event(magnitude=4.6, time=NOW_MS - HOUR),
        make_event(magnitude=6.3, time=NOW_MS - 23 * HOUR),
        make_event(magnitude=5.0, time=NOW_MS - 48 * HOUR),
    ]
    s = statistics(events, NOW)

    assert s.total == 3
    assert s.avg_magnitude == 5.3
    assert s.max_magnitude == 6.3
    assert s.min_magnitude == 4.6
    assert s.last_24h == 2


def test_empty_panel_is_zeroed():
    assert EMPTY.total == 0
    assert EMPTY.last_24h == 0
    assert (EMPTY.avg_magnitude, EMPTY.max_magnitude, EMPTY.min_magnitude) == (0.0, 0.0, 0.0)
