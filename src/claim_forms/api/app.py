"""FastAPI application serving the PDF endpoints."""

from __future__ import annotations

import importlib.metadata

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..exceptions import ClaimFormsError, SubmissionNotFound, UnsupportedFormType
from ..store import InMemorySubmissionStore
from . import routes


def _get_version() -> str:
    try:
        return importlib.metadata.version("claim-forms-pdf")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def register_error_handlers(app: FastAPI) -> None:
    """Map domain exceptions to JSON error responses."""

    @app.exception_handler(UnsupportedFormType)
    async def handle_unsupported(request: Request, exc: UnsupportedFormType) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc), "type": "unsupported_form_type"})

    @app.exception_handler(ValidationError)
    async def handle_invalid(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc), "type": "invalid_request"})

    @app.exception_handler(SubmissionNotFound)
    async def handle_not_found(request: Request, exc: SubmissionNotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc), "type": "not_found"})

    @app.exception_handler(ClaimFormsError)
    async def handle_generic(request: Request, exc: ClaimFormsError) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"error": f"Failed to generate PDF: {exc}", "type": type(exc).__name__},
        )


def create_app(store: InMemorySubmissionStore | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        store: Submission store (a fresh in-memory store if not provided)
    """
    app = FastAPI(title="Claim forms PDF service", version=_get_version())
    app.state.store = store or InMemorySubmissionStore()
    register_error_handlers(app)
    app.include_router(routes.router)
    return app
