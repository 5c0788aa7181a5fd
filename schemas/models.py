# schemas/models.py
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


class EarthquakeEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    depth: Optional[float] = None
    magnitude: Optional[float] = None
    place: Optional[str] = None
    time: Optional[int] = None
    timeString: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    tsunami: Optional[int] = None
    type: Optional[str] = None
    status: Optional[str] = None
    updated: Optional[int] = None


class Metadata(BaseModel):
    generated: Optional[int] = None
    url: Optional[str] = None
    title: Optional[str] = None
    count: Optional[int] = None


class EarthquakesResponse(BaseModel):
    count: int
    earthquakes: List[EarthquakeEvent]
    metadata: Metadata


class ErrorOut(BaseModel):
    error: str
    details: str
