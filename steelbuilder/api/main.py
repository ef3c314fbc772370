"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from steelbuilder.config import get_settings, configure_logging
from steelbuilder.api.routes import router


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Store-level validation failures are client errors."""
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors(include_url=False, include_context=False))},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Steel Building Generator",
        description="Parametric geometry engine for pre-engineered steel buildings",
        version="0.1.0",
    )

    # CORS: allow the frontend dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
