import pytest

from globe.regions import REGIONS, in_region, region_names


@pytest.mark.parametrize("lat,lng", [(0, 0), (89, 179), (-89, -179), (45, 100)])
def test_all_always_passes(make_event, lat, lng):
    assert in_region(make_event(lat=lat, lng=lng), "all")


@pytest.mark.parametrize("region,lat,lng,expected", [
    ("americas", 0, 100, False),
    ("americas", 34, -118, True),
    ("americas", 0, -30, True),
    ("asia-pacific", 35.7, 139.7, True),
    ("asia-pacific", -60, 139.7, False),
    ("europe-africa", 48, 2, True),
    ("europe-africa", 35.7, 139.7, False),
    ("atlantic", 0, -20, True),
    ("atlantic", 80, -20, False),
    ("pacific-ring", 35.7, 139.7, True),
    ("pacific-ring", -80, 150, True),
    ("pacific-ring", 61, -150, True),
    ("pacific-ring", 0, 0, False),
    ("pacific-ring", 48, 2, False),
])
def test_interval_rules(make_event, region, lat, lng, expected):
    assert in_region(make_event(lat=lat, lng=lng), region) is expected


def test_every_band_but_all_excludes_something(make_event):
    outside = [make_event(lat=lat, lng=lng) for lat in (-80, 0, 80) for lng in (-170, -45, 0, 100, 170)]
    for key in REGIONS:
        if key == "all":
            continue
        assert not all(in_region(e, key) for e in outside), key


def test_missing_coordinate_fails_band(make_event):
    assert not in_region(make_event(lng=None), "americas")
    assert in_region(make_event(lng=None), "all")


def test_unknown_region():
    with pytest.raises(KeyError):
        in_region(None, "antarctica")


def test_names():
    assert region_names()["europe-africa"] == "Europe & Africa"
    assert len(region_names()) == 6
