"""FastAPI application."""

from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from wandr import __version__
from wandr.api.schemas import AllocateRequest, AllocateResponse, GenerateItineraryRequest, HealthResponse
from wandr.config.settings import Settings, resolve_settings
from wandr.content.factory import get_city_info_source
from wandr.domain.enums import AllocationPolicy
from wandr.domain.exceptions import (
    ContentUnavailableError,
    DomainError,
    InvalidInputError,
    OverAllocatedError,
)
from wandr.domain.models import CityInfo, ErrorResponse
from wandr.infrastructure.logging import get_logger
from wandr.planner.allocation import allocate
from wandr.planner.recommended import allocate_recommended

_api_logger = logging.getLogger("wandr.api")

load_dotenv()

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    InvalidInputError: 400,
    OverAllocatedError: 409,
    ContentUnavailableError: 503,
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


def _error_response(exc: DomainError) -> JSONResponse:
    status = next(
        (code for error_type, code in _STATUS_BY_ERROR.items() if isinstance(exc, error_type)),
        400,
    )
    body = ErrorResponse(code=exc.code, message=str(exc))
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or resolve_settings()
    app = FastAPI(
        title="wandr",
        version=__version__,
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.city_info_source = get_city_info_source(settings)

    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(DomainError)
    async def _domain_error_handler(request: Request, exc: DomainError):
        _api_logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return _error_response(exc)

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok")

    @app.post("/allocate", response_model=AllocateResponse)
    def allocate_trip(req: AllocateRequest):
        logger = get_logger()
        logger.step_start("allocate", policy=req.policy.value, cities=len(req.cities))
        try:
            skeleton = req.to_skeleton()
            if req.policy == AllocationPolicy.RECOMMENDED:
                allocations = allocate_recommended(skeleton, req.pace)
            else:
                allocations = allocate(skeleton)
        except DomainError as exc:
            logger.error("allocate", str(exc), code=exc.code)
            raise
        logger.step_end("allocate", nights=[a.nights for a in allocations])
        return AllocateResponse(
            policy=req.policy,
            total_nights=skeleton.total_nights,
            allocations=allocations,
            trace_id=logger.trace_id,
        )

    @app.get("/city-info", response_model=CityInfo)
    def city_info(city: Optional[str] = None, country: Optional[str] = None):
        if not city or not city.strip():
            raise InvalidInputError("City parameter required")
        return app.state.city_info_source.get_city_info(city, country)

    @app.post("/generate-itinerary", status_code=503, response_model=ErrorResponse)
    def generate_itinerary(req: GenerateItineraryRequest):
        # Generation is off; the route stays so clients get a stable answer.
        raise ContentUnavailableError("itinerary generation")

    return app


app = create_app()
