# proxy/routers/earthquakes.py
import json
import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from proxy.transform import to_response
from proxy.usgs import UpstreamError, build_query_params, fetch_feature_collection
from schemas.models import EarthquakesResponse, ErrorOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/earthquakes", tags=["earthquakes"])

# how many reshaped events to dump at DEBUG
SAMPLE_SIZE = 3


@router.get(
    "",
    response_model=EarthquakesResponse,
    responses={500: {"model": ErrorOut}},
)
def earthquakes(
    minmagnitude: str = Query("4.5"),
    limit: str = Query("1000"),
    format: str = Query("geojson"),
    starttime: Optional[str] = Query(None),
    endtime: Optional[str] = Query(None),
):
    """
    Proxy for the USGS event query: forwards the filter, flattens the
    GeoJSON features and returns them with the upstream metadata.
    """
    logger.info("Received request for earthquakes: minmagnitude=%s limit=%s starttime=%s endtime=%s",
                minmagnitude, limit, starttime, endtime)

    params = build_query_params(minmagnitude, limit, format, starttime, endtime)
    try:
        result = to_response(fetch_feature_collection(params))
    except UpstreamError as e:
        logger.error("Failed to fetch earthquake data: %s", e.message)
        body = ErrorOut(error="Failed to fetch earthquake data", details=e.message)
        return JSONResponse(status_code=500, content=body.model_dump())

    for event in result.earthquakes[:SAMPLE_SIZE]:
        logger.debug("Earthquake processed: %s", json.dumps(event.model_dump()))
    logger.info("Sending %d processed earthquakes", result.count)
    return result
