"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from replysuggest.application.dispatcher import get_dispatcher
from replysuggest.infrastructure import configure_logging, get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    # Build provider clients once, up front
    dispatcher = get_dispatcher()
    available = [p.value for p in dispatcher.available_providers()]
    if available:
        logger.info(f"Configured providers: {', '.join(available)}")
    else:
        logger.warning("No provider credentials configured; every request will fail")

    yield

    logger.info("Shutdown complete")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as {"error": ...} like every other failure."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or 'body'}: {err['msg']}" for err in exc.errors()
    )
    logger.warning(f"Rejected malformed request: {details}")
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {details}"})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="AI reply suggestions for email drafts",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Register routes
    from replysuggest.api.routes import router

    app.include_router(router)

    return app


# Create app instance
app = create_app()
