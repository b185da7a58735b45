import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import responses
from .config import Settings, settings as default_settings
from .database import build_engine, build_session_factory, create_tables
from .errors import AppError, ErrorKind, describe_error
from .logger import get_logger, setup_logging
from .routers import categories, health, transactions
from .rpc import app_router
from .rpc.endpoint import build_rpc_router
from .services import Services

logger = get_logger("api")

HTTP_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}


def error_response(request: Request, exc: Exception) -> JSONResponse:
    """The one place REST failures are translated into responses"""
    description = describe_error(exc)
    if description.kind is ErrorKind.INTERNAL:
        logger.error("Unexpected error on %s %s", request.method, request.url.path, exc_info=exc)

    return JSONResponse(
        status_code=HTTP_STATUS_BY_KIND[description.kind],
        content=responses.failure(description.message, description.details),
    )


def create_app(settings: Optional[Settings] = None, services: Optional[Services] = None) -> FastAPI:
    """Build the application.

    Services are constructed once here and shared by every request handler;
    pass ``services`` to run the API over a different database.
    """
    settings = settings or default_settings
    setup_logging(settings)

    engine = None
    if services is None:
        engine = build_engine(settings.DATABASE_URL)
        services = Services(build_session_factory(engine))

    # Create FastAPI app
    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.settings = settings
    app.state.services = services

    # Create database tables on startup
    @app.on_event("startup")
    def startup_event():
        if engine is not None:
            create_tables(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    # Error boundary
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(request, exc)

    @app.exception_handler(SchemaValidationError)
    async def schema_validation_handler(request: Request, exc: SchemaValidationError):
        return error_response(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content=responses.failure("Endpoint not found"))
        return JSONResponse(status_code=exc.status_code, content=responses.failure(str(exc.detail)))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        return error_response(request, exc)

    # Include API routers
    app.include_router(health.router, prefix=settings.API_V1_STR, tags=["health"])
    app.include_router(categories.router, prefix=f"{settings.API_V1_STR}/categories", tags=["categories"])
    app.include_router(transactions.router, prefix=f"{settings.API_V1_STR}/transactions", tags=["transactions"])
    app.include_router(build_rpc_router(app_router), prefix=settings.RPC_PREFIX, tags=["rpc"])

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
