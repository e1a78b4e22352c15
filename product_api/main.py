"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from product_api.api import health
from product_api.api import router as api_router
from product_api.core.config import Settings, get_settings
from product_api.core.database import build_engine, build_session_factory, init_db

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn unexpected errors into a generic problem response; details go to the log only."""
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        media_type="application/problem+json",
        content={
            "type": "about:blank",
            "title": "Internal Server Error",
            "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "detail": "An unexpected error occurred.",
        },
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own engine and session factory."""
    settings = settings or get_settings()
    configure_logging(settings)

    engine = build_engine(settings)
    init_db(engine)

    app = FastAPI(
        title="Product API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.include_router(health.router, tags=["health"])
    logger.info(
        "Application configured",
        extra={"app_env": settings.APP_ENV, "api_prefix": settings.API_PREFIX},
    )
    return app


app = create_app()
