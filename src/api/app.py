from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


def _show_details(request: Request) -> bool:
    config = request.app.state.config
    return str(getattr(config, "ENVIRONMENT", "development")).lower() != "production"


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": "error",
            "error": exc.base_error.message,
            "code": exc.base_error.code,
            **exc.extra,
        },
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}")
    content = {"status": "error", "message": "Internal server error"}
    if _show_details(request):
        content["details"] = exc.base_error.message
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request on {request.url.path}")
    content = {"status": "error", "error": "Invalid request body", "code": "INVALID_REQUEST"}
    if _show_details(request):
        content["details"] = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg")} for err in exc.errors()
        ]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    message = "Endpoint not found" if exc.status_code == 404 else exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": message},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    content = {"status": "error", "message": "Internal server error"}
    if _show_details(request):
        content["details"] = str(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fail fast if the store is unreachable; drain and close the pool on shutdown."""
    from src.depends import engine

    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
        if app.state.config.AUTO_CREATE_TABLES:
            await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Connected to database")

    yield

    await engine.dispose()
    logger.info("Database connections closed")


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Action Tracker API", version=ApplicationConfig.VERSION, lifespan=lifespan)
    app.state.config = ApplicationConfig

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "X-API-Key"],
    )

    from src.api.routes import actions, analytics, health_check

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.root_router, tags=["Health"])
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(actions.router, prefix=prefix, tags=["Actions"])
    app.include_router(actions.legacy_router, tags=["Actions"])
    app.include_router(analytics.router, prefix=prefix, tags=["Analytics"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
