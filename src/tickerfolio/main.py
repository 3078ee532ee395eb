"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tickerfolio import __version__
from tickerfolio.config.settings import get_settings
from tickerfolio.config.logging_config import setup_logging
from tickerfolio.api.routers import (
    portfolio_router,
    treemap_router,
    goals_router,
    transactions_router,
)
from tickerfolio.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Portfolio aggregation and treemap layout for a personal stock tracker",
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(portfolio_router)
app.include_router(treemap_router)
app.include_router(goals_router)
app.include_router(transactions_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
