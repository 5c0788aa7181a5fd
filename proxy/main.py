import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from proxy import settings
from proxy.routers import earthquakes
from proxy.middleware.metrics import MetricsMiddleware


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("USGS Earthquake Proxy running on http://%s:%s", settings.HOST, settings.PORT)
    yield
    logger.info("Server closed")


app = FastAPI(
    title="Quake Globe Proxy",
    version="1.0",
    description="Reshapes USGS earthquake GeoJSON into flat records for the globe view.",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)


@app.get("/health")
def health():
    return {"status": "ok"}


# Prometheus exposition format
@app.get("/metrics")
def metrics():
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)


app.include_router(earthquakes.router)


def run():
    # uvicorn handles SIGTERM/SIGINT: stops accepting, drains in-flight requests, exits
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
