from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.api.main import api_router
from app.services.recommendation_service import recommendation_service

from .config import settings
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    logger.info(f"Jellypicks {__version__} starting ({settings.APP_ENV}, cache backend: {settings.CACHE_BACKEND})")
    yield
    await recommendation_service.close()
    logger.info("Recommendation service clients closed")


app = FastAPI(
    title="Jellypicks",
    description="Personalized home screen recommendations for Jellyfin users",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
