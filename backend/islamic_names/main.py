"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from islamic_names.core.config import get_settings
from islamic_names.core.logging import setup_logging

# Setup logging
logger = setup_logging("main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize services at startup."""
    try:
        from islamic_names.services.orchestrator import build_orchestrator

        app.state.name_orchestrator = build_orchestrator(get_settings())
        logger.info("Services initialized successfully")
    except Exception as exc:
        logger.error(
            "Service initialization failed, running in degraded mode",
            exc_info=True,
            extra={"error_type": type(exc).__name__},
        )
        # Endpoints return 503 until fixed

    yield


app = FastAPI(
    title="Islamic Name Finder",
    description="Islamic baby name suggestions from a photo or the father's name",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[f"http://localhost:{settings.frontend_port}"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
from islamic_names.api.names import router as names_router  # noqa: E402

app.include_router(names_router)


@app.get("/health")
async def health_check(request: Request) -> dict:
    """Health check endpoint.

    Always returns HTTP 200; check `services.name_orchestrator` for actual status.
    """
    orchestrator = getattr(request.app.state, "name_orchestrator", None)

    logger.info("Health check requested")
    return {
        "status": "ok",
        "version": app.version,
        "services": {
            "name_orchestrator": "ok" if orchestrator is not None else "unavailable",
        },
    }
