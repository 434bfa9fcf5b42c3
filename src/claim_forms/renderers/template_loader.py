"""
Loading of the fixed insurer templates from ``public/forms``.

The templates are deployment assets: this module only reads them. When a
lenient renderer cannot use its template it builds a one-page stand-in with
reportlab instead (see ``build_fallback_pdf``).
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Iterable

import fitz  # pymupdf
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError
from reportlab.pdfgen import canvas

from ..config import config
from ..exceptions import TemplateNotFound

logger = logging.getLogger(__name__)

FALLBACK_PAGE_SIZE = (600, 800)
FALLBACK_TITLE_Y = 750
FALLBACK_FIRST_ROW_Y = 700
FALLBACK_ROW_STEP = 25
FALLBACK_MIN_Y = 50


def template_path(filename: str, forms_dir: Path | None = None) -> Path:
    """Resolve a template filename under the forms asset directory."""
    return Path(forms_dir or config.FORMS_DIR) / filename


def load_template(path: Path) -> fitz.Document:
    """
    Open a fillable template.

    Args:
        path: Template file path

    Returns:
        The open document (the caller owns and closes it)

    Raises:
        TemplateNotFound: If the file is missing, unreadable or not a PDF
    """
    try:
        content = Path(path).read_bytes()
    except OSError as exc:
        raise TemplateNotFound(path, exc.strerror or str(exc)) from exc

    try:
        doc = fitz.open(stream=content, filetype="pdf")
    except (RuntimeError, ValueError) as exc:
        raise TemplateNotFound(path, f"not a readable PDF: {exc}") from exc

    if len(doc) == 0:
        doc.close()
        raise TemplateNotFound(path, "document has no pages")

    logger.debug("Loaded template %s (%d pages)", path, len(doc))
    return doc


def list_template_fields(path: Path) -> dict[str, str]:
    """
    List the AcroForm fields of a template with their kind.

    Args:
        path: Template file path

    Returns:
        Mapping of field name to one of ``text``, ``checkbox``, ``radio``,
        ``choice`` or ``unknown``
    """
    try:
        reader = PdfReader(str(path))
        fields = reader.get_fields() or {}
    except (OSError, PdfReadError) as exc:
        raise TemplateNotFound(path, str(exc)) from exc

    kinds: dict[str, str] = {}
    for name, info in fields.items():
        field_type = str(info.get("/FT", ""))
        flags = int(info.get("/Ff", 0) or 0)
        if field_type == "/Tx":
            kind = "text"
        elif field_type == "/Btn":
            # bit 16 marks a radio group, bit 17 a push button
            if flags & (1 << 15):
                kind = "radio"
            elif flags & (1 << 16):
                kind = "unknown"
            else:
                kind = "checkbox"
        elif field_type == "/Ch":
            kind = "choice"
        else:
            kind = "unknown"
        kinds[name] = kind
    return kinds


def build_fallback_pdf(title: str, rows: Iterable[tuple[str, str]]) -> bytes:
    """
    Draw a plain page listing ``label: value`` rows.

    Rows with an empty value are skipped and rows that would fall below the
    bottom margin are dropped.
    """
    buffer = BytesIO()
    canv = canvas.Canvas(buffer, pagesize=FALLBACK_PAGE_SIZE)

    canv.setFont("Helvetica", 20)
    canv.drawString(50, FALLBACK_TITLE_Y, title)

    canv.setFont("Helvetica", 12)
    y_position = FALLBACK_FIRST_ROW_Y
    for label, value in rows:
        if value and y_position > FALLBACK_MIN_Y:
            canv.drawString(50, y_position, f"{label}: {value}")
            y_position -= FALLBACK_ROW_STEP

    canv.showPage()
    canv.save()
    return buffer.getvalue()
