"""
Claim Forms PDF module

This module fills the fixed insurer certificates and job forms (ABSA,
Clearance, SAHL, Discovery, Liability, Non-compliance, Material List) with
submitted form data and returns flattened PDFs.

Usage:
    # Render a stored submission
    from claim_forms import FormSubmission, render_pdf

    submission = FormSubmission(
        formId="form-sahl-certificate",
        data={"field-clientname": "Jane Doe", "field-checkbox1": "yes"},
    )
    pdf_bytes = render_pdf(submission)

    # Render without raising
    from claim_forms import render_submission

    result = render_submission(submission)
    if result.success:
        open("sahl.pdf", "wb").write(result.pdf)
    else:
        print(result.error_type, result.error)

    # Serve the HTTP API
    python -m claim_forms serve --port 8080
"""

from .main import render_form_data, render_pdf, render_submission
from .exceptions import (
    ClaimFormsError,
    RenderError,
    SerializationError,
    SignatureProcessingError,
    TemplateNotFound,
    UnsupportedFormType,
)
from .schemas.base import FormType, RenderResult
from .schemas.submission import FormSubmission

__all__ = [
    # Rendering
    "render_pdf",
    "render_form_data",
    "render_submission",
    # Types
    "FormType",
    "FormSubmission",
    "RenderResult",
    # Errors
    "ClaimFormsError",
    "RenderError",
    "SerializationError",
    "SignatureProcessingError",
    "TemplateNotFound",
    "UnsupportedFormType",
]
