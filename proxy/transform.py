# proxy/transform.py
from datetime import datetime, timezone

from pydantic import ValidationError

from proxy.usgs import UpstreamError
from schemas.models import EarthquakeEvent, EarthquakesResponse, Metadata


def iso_time(ms):
    # same rendering as JS Date.toISOString(): UTC, millisecond precision, "Z"
    if ms is None:
        return None
    dt = datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def feature_to_event(feature):
    geom = feature.get("geometry") or {}
    props = feature.get("properties") or {}

    # coordinates: [lng, lat, depth]
    coords = list(geom.get("coordinates") or [])
    coords += [None] * (3 - len(coords))
    lng, lat, depth = coords[0], coords[1], coords[2]

    return EarthquakeEvent(
        id=feature["id"],
        lat=lat,
        lng=lng,
        depth=depth,
        magnitude=props.get("mag"),
        place=props.get("place"),
        time=props.get("time"),
        timeString=iso_time(props.get("time")),
        title=props.get("title"),
        url=props.get("url"),
        tsunami=props.get("tsunami"),
        type=props.get("type"),
        status=props.get("status"),
        updated=props.get("updated"),
    )


def to_response(collection):
    """
    Flatten a GeoJSON FeatureCollection into the globe payload.
    A missing feature list is an empty result, not an error; a feature that
    cannot be flattened fails the whole batch with UpstreamError.
    """
    if not isinstance(collection, dict):
        collection = {}

    features = collection.get("features") or []
    if not isinstance(features, list):
        raise UpstreamError(None, f"Unexpected features value from USGS API: {type(features).__name__}")

    try:
        earthquakes = [feature_to_event(f) for f in features]
        meta = collection.get("metadata") or {}
        return EarthquakesResponse(
            count=len(earthquakes),
            earthquakes=earthquakes,
            metadata=Metadata(
                generated=meta.get("generated"),
                url=meta.get("url"),
                title=meta.get("title"),
                count=meta.get("count"),
            ),
        )
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise UpstreamError(None, f"Malformed feature from USGS API: {e!r}") from e
