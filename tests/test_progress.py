from globe.progress import advance, caption, random_increment


def test_caps_at_95_until_loaded():
    assert advance(50.0, 3.0, loaded=False, elapsed=1.0) == (53.0, False)
    assert advance(94.0, 3.0, loaded=False, elapsed=30.0) == (95.0, False)


def test_waits_for_minimum_time():
    assert advance(80.0, 2.0, loaded=True, elapsed=1.0) == (82.0, False)
    assert advance(80.0, 2.0, loaded=True, elapsed=5.0) == (100.0, True)
    assert advance(80.0, 2.0, loaded=True, elapsed=0.0, min_seconds=0) == (100.0, True)


def test_increment_range():
    for _ in range(200):
        assert 1.0 <= random_increment() <= 4.0


def test_captions():
    assert caption(0) == "Connecting to USGS API..."
    assert caption(45) == "Fetching earthquake data..."
    assert caption(75) == "Processing coordinates..."
    assert caption(95) == "Preparing visualization..."
