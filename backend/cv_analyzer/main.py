import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cv_analyzer.api import cv_routes
from cv_analyzer.config import Settings, get_settings
from cv_analyzer.exceptions import CVAnalysisError, InvalidUpload
from cv_analyzer.models.analysis_models import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, details: str | None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ── Error Handlers ──────────────────────────────────────────────────────────


async def _analysis_error_handler(request: Request, exc: CVAnalysisError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.exception(f"{type(exc).__name__} on {request.url.path}: {exc}", exc_info=exc)
    else:
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")
    return _error_response(exc.status_code, exc.error, str(exc))


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning(f"Invalid request on {request.url.path}: {details}")
    return _error_response(InvalidUpload.status_code, InvalidUpload.error, details)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.url.path}")
    return _error_response(500, CVAnalysisError.error, str(exc))


# ── App Factory ─────────────────────────────────────────────────────────────


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI app; an explicit ``settings`` replaces the environment-loaded one."""
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        description="AI-powered CV analysis: skills, experience, tone, validation and job matching",
    )
    app.dependency_overrides[get_settings] = lambda: settings

    # ── CORS ────────────────────────────────────────────────────────────────

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_allowed_headers,
    )

    app.add_exception_handler(CVAnalysisError, _analysis_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    # ── Routers ─────────────────────────────────────────────────────────────

    app.include_router(cv_routes.router, tags=["CV Analysis"])

    # ── Health Check ────────────────────────────────────────────────────────

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "app": settings.app_name, "version": settings.version}

    return app


app = create_app()
