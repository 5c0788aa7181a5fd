# proxy/settings.py
import os
from dotenv import load_dotenv
load_dotenv()

USGS_BASE_URL = os.getenv("USGS_BASE_URL", "https://earthquake.usgs.gov/fdsnws/event/1/query")
USGS_TIMEOUT = float(os.getenv("USGS_TIMEOUT", "30"))
USER_AGENT = os.getenv("USER_AGENT", "Quake-Globe-Proxy/1.0")

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))
SHUTDOWN_TIMEOUT = int(os.getenv("SHUTDOWN_TIMEOUT", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
