import logging
import os

import requests
from dotenv import load_dotenv
from pydantic import ValidationError

from schemas.models import EarthquakesResponse

load_dotenv()

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3001")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "60"))


class FetchError(Exception):
    """The proxy could not be reached, answered with an error or sent garbage."""


def fetch_events(base_url=API_BASE_URL, minmagnitude=4.5, limit=1000, session=None, timeout=API_TIMEOUT):
    """
    Fetch the flattened earthquake list from the proxy.

    Returns a list of EarthquakeEvent. Raises FetchError on a network error,
    a non-2xx status or a body that is not the expected payload.
    """
    http = session or requests
    url = f"{base_url.rstrip('/')}/earthquakes"
    params = dict(minmagnitude=minmagnitude, limit=limit)

    logger.info("Fetching earthquake data from %s", url)
    try:
        r = http.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch earthquake data: {e}") from e

    if not r.ok:
        raise FetchError(f"Failed to fetch earthquake data: HTTP error! status: {r.status_code}")

    try:
        payload = EarthquakesResponse.model_validate(r.json())
    except (ValueError, ValidationError) as e:
        logger.error("Invalid data structure from %s: %s", url, e)
        raise FetchError("Invalid data received from server") from e

    logger.info("Earthquake data received: %d events", payload.count)
    return payload.earthquakes
