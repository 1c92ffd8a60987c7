import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travel_data.config import settings

# ─── Logging setup (console, plus rotating file when LOG_DIR is set) ───
_log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

_handlers: list[logging.Handler] = [logging.StreamHandler()]
if settings.log_dir:
    _log_dir = Path(settings.log_dir)
    _log_dir.mkdir(parents=True, exist_ok=True)
    _handlers.append(
        RotatingFileHandler(
            _log_dir / "travel-data.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
    )

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=_handlers,
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from travel_data.routers import flights, hotels
from travel_data.services.http_client import close_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.amadeus_client_id:
        logger.warning("AMADEUS_CLIENT_ID not set, flight searches will fail authentication")
    yield
    await close_http_client()


app = FastAPI(
    title="Travel Data API",
    description="Flight and hotel search proxy over Amadeus",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(flights.router, prefix="/api/flights", tags=["flights"])
app.include_router(hotels.router, prefix="/api/hotels", tags=["hotels"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "travel-data"}
