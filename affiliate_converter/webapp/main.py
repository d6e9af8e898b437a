"""
FastAPI application entry point for the affiliate converter.

Run with:
    uvicorn affiliate_converter.webapp.main:app --reload

Open: http://127.0.0.1:8000/docs
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from affiliate_converter import __version__
from affiliate_converter.utils.logging_config import setup_logging
from affiliate_converter.webapp.exceptions import AppException
from affiliate_converter.webapp.routes import get_app_config, get_converter, router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    config = get_app_config()
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )

    logger.info(f"Affiliate converter API starting (tag={get_converter().tag})...")
    yield
    logger.info("Affiliate converter API shutting down...")


app = FastAPI(
    title="Amazon Affiliate Link Converter",
    description="Rewrites Amazon product URLs into affiliate links",
    version=__version__,
    lifespan=lifespan,
)


@app.middleware("http")
async def error_handling_middleware(request: Request, call_next):
    """Global error handling middleware."""
    start_time = time.time()
    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.exception(f"Unhandled error processing {request.url.path}: {e}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(e) if app.debug else "An unexpected error occurred",
                "path": str(request.url.path),
            },
            headers={"X-Process-Time": str(process_time)},
        )


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Render application errors as JSON."""
    logger.warning(f"{exc.error_code} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/health/simple")
async def simple_health_check() -> dict[str, Any]:
    """Simple health check for load balancers."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    config = get_app_config()
    uvicorn.run("affiliate_converter.webapp.main:app", host=config.web.host, port=config.web.port)
