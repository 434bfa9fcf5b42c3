"""
PDF endpoints.

The URLs are the ones the web client already calls. Handlers are plain
``def`` functions so the blocking render runs in FastAPI's thread pool.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import Response, StreamingResponse
from starlette.background import BackgroundTask

from ..downloads import iter_file_and_remove, remove_temp_file, write_temp_pdf
from ..main import render_form_data, render_pdf
from ..renderers.template_loader import build_fallback_pdf
from ..schemas.base import FormType
from ..schemas.requests import MaterialListRequest, NoncomplianceRequest

logger = logging.getLogger(__name__)

router = APIRouter()

PDF_MEDIA_TYPE = "application/pdf"
UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def _safe_name(value: str) -> str:
    """Reduce a path parameter to characters valid in a file name and a latin-1 header."""
    return UNSAFE_NAME_CHARS.sub("_", value)


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f"attachment; filename={filename}"}


def _download(pdf_bytes: bytes, stem: str, filename: str) -> StreamingResponse:
    """Write *pdf_bytes* to a temp file and stream it, deleting it afterwards."""
    path = write_temp_pdf(pdf_bytes, stem)
    return StreamingResponse(
        iter_file_and_remove(path),
        media_type=PDF_MEDIA_TYPE,
        headers=_attachment(filename),
        # covers responses whose body iterator is never started
        background=BackgroundTask(remove_temp_file, path),
    )


def _query_data(request: Request) -> dict[str, Any]:
    return dict(request.query_params)


@router.get("/health", tags=["health"])
def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


# ── Stored submissions ───────────────────────────────────────────────


def _submission_response(request: Request, submission_id: str) -> Response:
    """Render a stored submission as an attachment."""
    submission = request.app.state.store.get(submission_id)
    logger.info("PDF requested for submission %s (%s)", submission_id, submission.form_id)
    pdf_bytes = render_pdf(submission)
    return Response(
        content=pdf_bytes,
        media_type=PDF_MEDIA_TYPE,
        headers=_attachment(submission.download_name),
    )


@router.get("/api/forms/{form_id}/submissions/{submission_id}/pdf", tags=["submissions"])
def form_submission_pdf(form_id: str, submission_id: str, request: Request) -> Response:
    return _submission_response(request, submission_id)


@router.get("/api/form-submissions/{submission_id}/pdf", tags=["submissions"])
def submission_pdf(submission_id: str, request: Request) -> Response:
    return _submission_response(request, submission_id)


# ── Form-specific downloads ──────────────────────────────────────────


@router.post("/api/generate-ABSACertificat-pdf", tags=["forms"])
def generate_absa_pdf(data: dict[str, Any] | None = Body(default=None)) -> StreamingResponse:
    pdf_bytes = render_form_data(FormType.ABSA, data or {})
    return _download(pdf_bytes, "ABSACertificate_filled", "ABSACertificate_filled.pdf")


@router.get("/api/generate-liability-pdf", tags=["forms"])
def generate_liability_pdf(request: Request) -> StreamingResponse:
    pdf_bytes = render_form_data(FormType.LIABILITY, _query_data(request))
    return _download(pdf_bytes, "LiabilityReport_filled", "LiabilityReport.pdf")


@router.get("/api/generate-sahl-pdf", tags=["forms"])
def generate_sahl_pdf(request: Request) -> StreamingResponse:
    pdf_bytes = render_form_data(FormType.SAHL, _query_data(request))
    return _download(pdf_bytes, "SAHLReport_filled", "SAHLReport.pdf")


@router.get("/api/generate-clearance-pdf", tags=["forms"])
def generate_clearance_pdf(request: Request) -> StreamingResponse:
    pdf_bytes = render_form_data(FormType.CLEARANCE, _query_data(request))
    return _download(pdf_bytes, "BBPClearanceCertificate_filled", "BBPClearanceCertificate.pdf")


@router.get("/api/discovery/{id}", tags=["forms"])
def generate_discovery_pdf(id: str, request: Request) -> StreamingResponse:
    pdf_bytes = render_form_data(FormType.DISCOVERY, _query_data(request))
    stem = f"discovery-{_safe_name(id)}"
    return _download(pdf_bytes, stem, f"{stem}.pdf")


@router.get("/api/generate-noncompliance-pdf/{id}", tags=["forms"])
def generate_noncompliance_pdf(id: str, request: Request) -> StreamingResponse:
    params = NoncomplianceRequest.model_validate(_query_data(request))
    pdf_bytes = render_form_data(FormType.NONCOMPLIANCE, params.to_form_data())
    stem = f"noncompliance-{_safe_name(id)}"
    return _download(pdf_bytes, stem, f"{stem}.pdf")


@router.post("/api/fill-material-list-pdf", tags=["forms"])
def fill_material_list_pdf(body: MaterialListRequest) -> Response:
    pdf_bytes = render_form_data(FormType.MATERIAL_LIST, body.to_form_data())
    return Response(
        content=pdf_bytes,
        media_type=PDF_MEDIA_TYPE,
        headers=_attachment("Material_List_Filled.pdf"),
    )


@router.get("/api/test-pdf", tags=["diagnostics"])
def test_pdf() -> Response:
    """One-page PDF proving the PDF stack works."""
    generated_at = datetime.now(timezone.utc).isoformat()
    pdf_bytes = build_fallback_pdf("Test PDF Generation", [("Generated at", generated_at)])
    return Response(content=pdf_bytes, media_type=PDF_MEDIA_TYPE, headers=_attachment("test.pdf"))
