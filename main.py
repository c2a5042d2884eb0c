"""
FastAPI Application Entry Point

Integrates:
  - Dialogflow fulfillment webhook (POST /assistant)
  - Health checks
  - Middleware for logging & error handling

Run: python main.py   (binds to $PORT, default 3000)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from webhook.assistant import router as assistant_router
from config import Config

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("Resto Assistant starting up...")
    logger.info(f"Port: {Config.PORT}")
    logger.info(f"Menu API: {Config.MENU_API_BASE_URL}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("Resto Assistant shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Resto Assistant API",
    description="Conversational assistant fulfillment for the resto menus",
    version="1.0.0",
    lifespan=lifespan,
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


# Include routers
app.include_router(assistant_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check (Kubernetes readiness probe)."""
    if Config.validate():
        return {"status": "ready"}
    return {"status": "not_ready", "reason": f"invalid port {Config.PORT}"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=Config.PORT,
    )
