# proxy/usgs.py
import logging
from datetime import datetime, timedelta, timezone

import requests

from proxy import settings
from proxy.middleware.metrics import UPSTREAM_CALLS

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 30


class UpstreamError(Exception):
    """The USGS query endpoint could not be reached or answered with an error."""

    def __init__(self, status, message):
        super().__init__(message)
        self.status = status
        self.message = message


def build_query_params(minmagnitude="4.5", limit="1000", format="geojson",
                       starttime=None, endtime=None, today=None):
    """
    Upstream query, ordered by time ascending.
    Without a starttime we ask for the last 30 days (UTC date, YYYY-MM-DD).
    """
    if today is None:
        today = datetime.now(timezone.utc).date()

    params = [
        ("format", str(format)),
        ("minmagnitude", str(minmagnitude)),
        ("limit", str(limit)),
        ("orderby", "time-asc"),
    ]
    if starttime:
        params.append(("starttime", str(starttime)))
    else:
        params.append(("starttime", (today - timedelta(days=DEFAULT_WINDOW_DAYS)).isoformat()))
    if endtime:
        params.append(("endtime", str(endtime)))
    return params


def fetch_feature_collection(params, session=None):
    http = session or requests
    headers = {"Accept": "application/json", "User-Agent": settings.USER_AGENT}

    try:
        r = http.get(settings.USGS_BASE_URL, params=params, headers=headers,
                     timeout=settings.USGS_TIMEOUT)
    except requests.RequestException as e:
        UPSTREAM_CALLS.labels(outcome="unreachable").inc()
        logger.error("USGS API unreachable: %s", e)
        raise UpstreamError(None, str(e)) from e

    logger.info("Request URL: %s", r.url)
    if not r.ok:
        UPSTREAM_CALLS.labels(outcome="http_error").inc()
        logger.error("USGS API responded with status %s", r.status_code)
        raise UpstreamError(r.status_code, f"USGS API responded with status {r.status_code}")

    try:
        data = r.json()
    except ValueError as e:
        UPSTREAM_CALLS.labels(outcome="invalid_body").inc()
        logger.error("USGS API returned a body that is not JSON: %s", e)
        raise UpstreamError(r.status_code, f"Invalid JSON from USGS API: {e}") from e

    UPSTREAM_CALLS.labels(outcome="ok").inc()
    return data
