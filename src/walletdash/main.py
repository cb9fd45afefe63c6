"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from walletdash.config.settings import get_settings
from walletdash.config.logging_config import setup_logging
from walletdash.api.routers import wallet_router, profit_loss_router, transfers_router
from walletdash.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: missing credentials are fatal unless running offline
    setup_logging()
    settings = get_settings()
    if not settings.offline_mode:
        settings.validate_credentials()
    yield
    # Shutdown (nothing to clean up)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Ethereum wallet balances, portfolio value, profit/loss and transfers",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(wallet_router)
app.include_router(profit_loss_router)
app.include_router(transfers_router)


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
        "version": settings.app_version,
        "docs": "/docs",
    }
