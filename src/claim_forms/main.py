"""
Main entry point for PDF generation.

This module provides the high-level functions that turn a form submission
(or a bare data mapping) into a flattened, filled PDF of the matching
insurer template.
"""

import logging
from pathlib import Path
from typing import Any, Mapping

from .clients.signature_client import SignatureClient
from .exceptions import ClaimFormsError, UnsupportedFormType
from .mappers import TEMPLATES
from .renderers.pdf_renderer import TemplateRenderer
from .schemas.base import FormType, RenderResult
from .schemas.submission import FormSubmission

logger = logging.getLogger(__name__)


def get_renderer(
    form_type: FormType | str,
    forms_dir: Path | None = None,
    signature_client: SignatureClient | None = None,
) -> TemplateRenderer:
    """
    Build the renderer for a form id.

    Raises:
        UnsupportedFormType: If the form has no PDF template
    """
    resolved = form_type if isinstance(form_type, FormType) else FormType.from_id(form_type)
    if resolved is None or resolved not in TEMPLATES:
        raise UnsupportedFormType(str(getattr(form_type, "value", form_type)))
    return TemplateRenderer(TEMPLATES[resolved], forms_dir=forms_dir, signature_client=signature_client)


def render_form_data(
    form_type: FormType | str,
    data: Mapping[str, Any],
    signature: str | None = None,
    forms_dir: Path | None = None,
    signature_client: SignatureClient | None = None,
) -> bytes:
    """
    Render a bare data mapping into the template of *form_type*.

    Args:
        form_type: Form id or FormType member
        data: Field values keyed as the web client submits them
        signature: Signature used when *data* carries none
        forms_dir: Template directory (defaults to config value)
        signature_client: Client for URL signatures

    Returns:
        Flattened PDF bytes

    Raises:
        UnsupportedFormType: If the form has no PDF template
        TemplateNotFound: If a strict template is missing
        RenderError: If a strict template cannot be filled
        SerializationError: If a strict template cannot be saved
    """
    renderer = get_renderer(form_type, forms_dir, signature_client)
    return renderer.render(data, signature=signature)


def render_pdf(
    submission: FormSubmission,
    forms_dir: Path | None = None,
    signature_client: SignatureClient | None = None,
) -> bytes:
    """
    Render a stored submission.

    The form id is checked before any file is touched.

    Example:
        >>> pdf = render_pdf(FormSubmission(formId="form-sahl-certificate", data={...}))
        >>> pdf[:5]
        b'%PDF-'
    """
    logger.info(
        "Generating PDF for submission %s (form %s)", submission.id or "<unsaved>", submission.form_id
    )
    return render_form_data(
        submission.form_id,
        submission.data,
        signature=submission.signature,
        forms_dir=forms_dir,
        signature_client=signature_client,
    )


def render_submission(
    submission: FormSubmission,
    forms_dir: Path | None = None,
    signature_client: SignatureClient | None = None,
) -> RenderResult:
    """
    Render a submission and report the outcome instead of raising.

    Returns:
        RenderResult with the PDF bytes, or the error message and class name
    """
    try:
        pdf = render_pdf(submission, forms_dir=forms_dir, signature_client=signature_client)
    except ClaimFormsError as e:
        logger.error("PDF generation failed for %s: %s", submission.form_id, e)
        return RenderResult(
            success=False,
            form_id=submission.form_id,
            error=str(e),
            error_type=type(e).__name__,
        )

    return RenderResult(success=True, form_id=submission.form_id, pdf=pdf)
