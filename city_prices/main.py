from pathlib import Path
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from city_prices.api.v1.routes.cities import router as cities_router
from city_prices.api.v1.routes.health import router as health_router
from city_prices.config import settings
from city_prices.constants import MSG_INTERNAL_ERROR, MSG_INVALID_PAYLOAD
from city_prices.core.dependencies import get_document_repository
from city_prices.core.exceptions import CityStoreError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info(f"Starting up application, cities document: {get_document_repository().describe()}")

    yield

    # Shutdown
    logger.info("Shutting down application...")


async def city_store_error_handler(request: Request, exc: CityStoreError) -> JSONResponse:
    """Translate store errors into ``{"message": ...}`` responses."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are reported as 400, like store validation errors."""
    logger.debug(f"Rejected body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": MSG_INVALID_PAYLOAD})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Any other failure answers 500 with the generic message body."""
    logger.exception(f"{request.method} {request.url.path} failed unexpectedly", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": MSG_INTERNAL_ERROR},
    )


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    prefix = settings.API_PREFIX
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.API_VERSION,
        description="Documentacion para consultar y administrar precios informales por ciudad.",
        docs_url=f"{prefix}/docs",
        openapi_url=f"{prefix}/docs.json",
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=["Content-Length"],
    )

    app.add_exception_handler(CityStoreError, city_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health_router, prefix=prefix)
    app.include_router(cities_router, prefix=prefix)

    # Dashboard assets are optional; mounted last so API routes take precedence
    if settings.PUBLIC_DIR and Path(settings.PUBLIC_DIR).is_dir():
        app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True), name="public")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("city_prices.main:app", host=settings.HOST, port=settings.PORT)
