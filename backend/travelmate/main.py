import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from travelmate.config import settings

# ─── Logging setup (file + console) ───
_handlers: list[logging.Handler] = [logging.StreamHandler()]
if settings.log_to_file:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    _handlers.append(
        RotatingFileHandler(
            settings.log_dir / "travelmate.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
    )

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=_handlers,
)

# Quiet noisy libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from travelmate.routers import activities, deals, flights, hotels, recommendations, saved_trips, trips, users
from travelmate.seed import seed
from travelmate.services.storage import MemStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one store per app instance, handed to routes via get_store
    store = MemStorage()
    if settings.seed_on_startup:
        seed(store)
    app.state.store = store
    logger.info(f"{settings.app_name} store ready")

    yield

    logger.info(f"{settings.app_name} shutting down; in-memory data discarded")


app = FastAPI(
    title=settings.app_name,
    description="Travel booking demo API: flights, hotels, activities, deals and trips",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} validation errors")
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(users.router, prefix="/api/user", tags=["users"])
app.include_router(flights.router, prefix="/api/flights", tags=["flights"])
app.include_router(hotels.router, prefix="/api/hotels", tags=["hotels"])
app.include_router(activities.router, prefix="/api/activities", tags=["activities"])
app.include_router(deals.router, prefix="/api/deals", tags=["deals"])
app.include_router(trips.router, prefix="/api/trips", tags=["trips"])
app.include_router(saved_trips.router, prefix="/api/saved-trips", tags=["saved-trips"])
app.include_router(recommendations.router, prefix="/api/recommendations", tags=["recommendations"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "travelmate"}
