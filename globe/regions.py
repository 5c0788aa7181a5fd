"""Geographic bands for the region filter.

Each rule is a list of clauses (OR); each clause is a list of closed interval
tests (AND) on an event's ``lat`` / ``lng``. An empty rule matches everything.
"""

INF = float("inf")

REGIONS = {
    "all": {
        "name": "All Regions",
        "rule": [],
    },
    "pacific-ring": {
        "name": "Pacific Ring of Fire",
        "rule": [
            [("lng", 120, 180)],
            [("lng", -180, -100)],
            [("lat", -60, 70), ("lng", 120, INF)],
            [("lat", -60, 70), ("lng", -INF, -100)],
        ],
    },
    "americas": {
        "name": "Americas",
        "rule": [
            [("lng", -180, -30)],
        ],
    },
    "asia-pacific": {
        "name": "Asia Pacific",
        "rule": [
            [("lng", 60, 180), ("lat", -50, 70)],
        ],
    },
    "europe-africa": {
        "name": "Europe & Africa",
        "rule": [
            [("lng", -30, 60)],
        ],
    },
    "atlantic": {
        "name": "Atlantic Region",
        "rule": [
            [("lng", -60, 20), ("lat", -60, 70)],
        ],
    },
}


def region_names():
    return {key: region["name"] for key, region in REGIONS.items()}


def _passes(event, field, low, high):
    value = getattr(event, field)
    if value is None:
        return False
    return low <= value <= high


def in_region(event, region):
    """True if the event's coordinates fall inside the named band.

    Raises KeyError for an unknown region key.
    """
    rule = REGIONS[region]["rule"]
    if not rule:
        return True
    return any(
        all(_passes(event, field, low, high) for field, low, high in clause)
        for clause in rule
    )
