"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import address, eligibility
from app.core.config import settings
from app.core.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging(settings.effective_log_level)
    logger = get_logger("startup")
    logger.info(
        "Application starting",
        env=settings.APP_ENV,
        address_api=settings.ADDRESS_API_BASE_URL,
    )
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Marketplace Eligibility API",
    description="Eligibility questionnaire validation and address verification gateway",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/v1"
app.include_router(address.router, prefix=API_PREFIX)
app.include_router(eligibility.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
