"""
PDF building blocks: template loading, the form view and signature embedding.

``TemplateRenderer`` lives in ``renderers.pdf_renderer`` and is imported from
there; it depends on the field tables in ``claim_forms.mappers``.
"""

from .form import FieldKind, PdfForm
from .signature import BOUNDED, FLAT, SignatureSpec, embed_signature, resolve_signature
from .template_loader import build_fallback_pdf, list_template_fields, load_template, template_path

__all__ = [
    "FieldKind",
    "PdfForm",
    "BOUNDED",
    "FLAT",
    "SignatureSpec",
    "embed_signature",
    "resolve_signature",
    "build_fallback_pdf",
    "list_template_fields",
    "load_template",
    "template_path",
]
