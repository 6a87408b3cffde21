import time
from fastapi import FastAPI, Request, HTTPException
from contextlib import asynccontextmanager
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError

from humanize_scale.api.v1.endpoints.humanize import router as humanize_router
from humanize_scale.core.logging_config import (
    setup_logging,
    configure_external_loggers,
    get_logger,
)
from humanize_scale.core.config import ENV_FILE, settings

# Setup logging
setup_logging(settings.LOG_LEVEL)
configure_external_loggers()
logger = get_logger("main")


# Lifespan context manager for startup/shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info(f"{settings.PROJECT_NAME} starting up...")
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(f"Default scale preset: {settings.DEFAULT_SCALE_PRESET}")
    logger.info(f"Default minimum value: {settings.DEFAULT_MIN_VALUE}")
    logger.info(f"Environment file: {ENV_FILE or 'none'}")

    yield  # Application is running

    logger.info(f"{settings.PROJECT_NAME} shutting down...")


# Create FastAPI app instance
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)


# Global Exception Handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle FastAPI HTTPException."""
    logger.error(
        f"HTTP Exception: {exc.status_code} - {exc.detail} - Path: {request.url.path}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "status_code": exc.status_code},
    )


@app.exception_handler(StarletteHTTPException)
async def starlette_http_exception_handler(
    request: Request, exc: StarletteHTTPException
):
    """Handle Starlette HTTPException."""
    logger.error(
        f"Starlette HTTP Exception: {exc.status_code} - {exc.detail} - Path: {request.url.path}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "status_code": exc.status_code},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request parameter and body validation errors."""
    logger.error(
        f"Validation Error: {exc.errors()} - Path: {request.url.path}")
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "status_code": 422,
            "errors": jsonable_encoder(exc.errors()),
        },
    )


# Include API routers
app.include_router(
    humanize_router,
    prefix=settings.API_V1_STR,
    tags=["humanize"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "service": "humanize-scale-api",
        "version": settings.VERSION
    }


@app.get("/")
async def root():
    """Root endpoint that returns API info."""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "debug": settings.DEBUG,
        "docs": "/docs"
    }


def run():
    """Run the API server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "humanize_scale.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
