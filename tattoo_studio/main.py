# tattoo_studio/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import LOG_LEVEL, SEED_CHAIRS
from .db import init_db
from .routers import (
    appointments_routes,
    artists_routes,
    auth_routes,
    chairs_routes,
    studio_routes,
    users_routes,
)
from .store import StoreError

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(seed=SEED_CHAIRS)
    logger.info("Database ready")
    yield


app = FastAPI(title="Tattoo Studio Scheduling", lifespan=lifespan)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    return JSONResponse(
        status_code=503,
        content={"detail": {"code": "store_error", "message": str(exc)}},
    )


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(auth_routes.router)
app.include_router(users_routes.router)
app.include_router(chairs_routes.router)
app.include_router(artists_routes.router)
app.include_router(appointments_routes.router)
app.include_router(studio_routes.router)
