"""
TemplateRenderer - fills one insurer template and returns flattened bytes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from ..clients.signature_client import SignatureClient
from ..exceptions import ClaimFormsError, RenderError, SerializationError, TemplateNotFound
from ..mappers.descriptor import TemplateDescriptor
from ..mappers.rules import apply_rules, to_text
from ..utils.pdf_utils import PDF_HEADER
from .form import PdfForm
from .signature import embed_signature, resolve_signature
from .template_loader import build_fallback_pdf, load_template, template_path

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """
    Renders submissions for a single template.

    The pipeline is load, fill, sign, flatten, serialize. The loaded
    document belongs to one ``render`` call and is always closed.

    Attributes:
        descriptor: Template configuration (file, field table, signature)
        forms_dir: Directory holding the template assets
    """

    def __init__(
        self,
        descriptor: TemplateDescriptor,
        forms_dir: Path | None = None,
        signature_client: SignatureClient | None = None,
    ):
        """
        Initialize the renderer.

        Args:
            descriptor: Template configuration
            forms_dir: Template directory (defaults to config value)
            signature_client: Client for URL signatures (created lazily)
        """
        self.descriptor = descriptor
        self.forms_dir = forms_dir
        self.signature_client = signature_client

    @property
    def path(self) -> Path:
        return template_path(self.descriptor.template_filename, self.forms_dir)

    def render(self, data: Mapping[str, Any], signature: str | None = None) -> bytes:
        """
        Fill the template with *data*.

        Args:
            data: Submitted field values
            signature: Signature used when *data* carries none

        Returns:
            Flattened PDF bytes

        Raises:
            TemplateNotFound: If the template cannot be loaded (strict templates)
            RenderError: If the engine fails while filling (strict templates)
            SerializationError: If the filled document cannot be saved (strict templates)
        """
        label = self.descriptor.label
        logger.info("Rendering %s PDF from %s", label, self.path)

        try:
            doc = load_template(self.path)
        except TemplateNotFound as exc:
            if not self.descriptor.lenient:
                raise
            logger.warning("%s template unavailable, using fallback document: %s", label, exc)
            return self.render_fallback(data)

        try:
            try:
                form = PdfForm(doc)
                apply_rules(form, data, self.descriptor.rules, label)

                spec = self.descriptor.signature
                if spec is not None:
                    value = resolve_signature(data, spec.keys, fallback=signature)
                    embed_signature(doc, value, spec, self.signature_client, label)
            except ClaimFormsError:
                raise
            except Exception as exc:
                raise RenderError(f"Could not fill {label} PDF: {exc}") from exc

            try:
                form.flatten()
                pdf_bytes = doc.tobytes(garbage=3, deflate=True)
            except Exception as exc:
                raise SerializationError(f"Could not save {label} PDF: {exc}") from exc
        except RenderError as exc:
            if not self.descriptor.lenient:
                raise
            logger.warning("%s PDF could not be produced, using fallback document: %s", label, exc)
            return self.render_fallback(data)
        finally:
            doc.close()

        if not pdf_bytes.startswith(PDF_HEADER):
            raise SerializationError(f"{label} PDF output is not a PDF document")

        logger.info("%s PDF generated (%d bytes)", label, len(pdf_bytes))
        return pdf_bytes

    def render_fallback(self, data: Mapping[str, Any]) -> bytes:
        """Plain page listing the submitted values, for lenient templates."""
        if self.descriptor.fallback_rows is not None:
            rows = self.descriptor.fallback_rows(data)
        else:
            rows = [(key, to_text(value)) for key, value in data.items()]
        title = self.descriptor.fallback_title or self.descriptor.label
        return build_fallback_pdf(title, rows)

