"""
API routes for the reply suggestion service.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from replysuggest.application.dispatcher import SuggestionDispatcher, get_dispatcher
from replysuggest.domain import PROVIDERS, EmailContext, SuggestionError
from replysuggest.domain.errors import EmailValidationError
from replysuggest.infrastructure import get_settings

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class SuggestionRequest(BaseModel):
    """Request body for the suggestions endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    subject: str | None = Field(None, description="Subject of the email being answered")
    email_body: str | None = Field(None, alias="emailBody", description="Email content, plain text or JSON")
    thread_history: list[str] | None = Field(
        None, alias="threadHistory", description="Earlier messages in the thread, oldest first"
    )
    provider: str | None = Field(None, description="Provider id (defaults to the configured provider)")

    def to_context(self) -> EmailContext:
        return EmailContext(
            subject=self.subject,
            body=self.email_body,
            thread_history=tuple(self.thread_history or ()),
        )


class SuggestionResponse(BaseModel):
    """Successful suggestions response."""

    suggestions: list[str]
    provider: str


class ErrorResponse(BaseModel):
    error: str


class ProviderInfo(BaseModel):
    """Information about a provider backend."""

    id: str
    label: str
    model: str | None
    implemented: bool
    available: bool


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


# ============================================================================
# Health Endpoints
# ============================================================================


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
    )


@router.get("/health/live", tags=["health"])
async def liveness_check() -> dict[str, str]:
    """Kubernetes liveness probe endpoint."""
    return {"status": "alive"}


# ============================================================================
# Suggestions
# ============================================================================


@router.post(
    "/api/suggestions",
    response_model=SuggestionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["suggestions"],
)
async def create_suggestions(
    request: SuggestionRequest,
    dispatcher: SuggestionDispatcher = Depends(get_dispatcher),
):
    """Generate reply suggestions for an email draft."""
    try:
        context = request.to_context().ensure_content()
    except EmailValidationError as e:
        return error_response(400, str(e))

    provider = request.provider if request.provider is not None else get_settings().default_provider
    logger.info(f"Generating suggestions with {provider} for subject={(context.subject or '')[:40]!r}")

    try:
        result = await dispatcher.generate(context, provider)
    except SuggestionError as e:
        logger.error(f"Error generating suggestions: {e}")
        return error_response(500, str(e))
    except Exception as e:
        logger.exception(f"Unexpected error generating suggestions: {e}")
        return error_response(500, str(e) or "Unknown error")

    return SuggestionResponse(suggestions=result.suggestions, provider=result.provider)


@router.get("/api/providers", response_model=list[ProviderInfo], tags=["suggestions"])
async def list_providers(
    dispatcher: SuggestionDispatcher = Depends(get_dispatcher),
) -> list[ProviderInfo]:
    """List all known providers and whether each one is usable."""
    return [
        ProviderInfo(
            id=spec.id.value,
            label=spec.label,
            model=spec.model,
            implemented=spec.implemented,
            available=dispatcher.is_available(spec.id),
        )
        for spec in PROVIDERS.values()
    ]
