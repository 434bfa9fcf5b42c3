"""
PDF utility functions for opening and inspecting PDF documents.
"""

from pathlib import Path
import fitz  # pymupdf


PDF_HEADER = b"%PDF-"


def open_pdf(pdf_input: bytes | str | Path) -> fitz.Document:
    """
    Open a PDF from bytes or a file path.

    Args:
        pdf_input: PDF as bytes, file path string, or Path object

    Returns:
        An open PyMuPDF document (caller closes it)
    """
    if isinstance(pdf_input, bytes):
        return fitz.open(stream=pdf_input, filetype="pdf")
    return fitz.open(str(pdf_input))


def extract_text_from_pdf(pdf_input: bytes | str | Path) -> str:
    """
    Extract all text from a PDF.

    Args:
        pdf_input: PDF as bytes, file path string, or Path object

    Returns:
        Concatenated text from all pages
    """
    doc = open_pdf(pdf_input)
    text_parts = [page.get_text() for page in doc]
    doc.close()

    return "\n\n".join(text_parts)


def count_form_fields(pdf_input: bytes | str | Path) -> int:
    """Count interactive widgets left in a PDF (0 once flattened)."""
    doc = open_pdf(pdf_input)
    count = sum(len(list(page.widgets())) for page in doc)
    doc.close()

    return count


def count_images(pdf_input: bytes | str | Path) -> int:
    """Count raster images referenced by the pages of a PDF."""
    doc = open_pdf(pdf_input)
    count = sum(len(page.get_images(full=True)) for page in doc)
    doc.close()

    return count


def is_valid_pdf(data: bytes) -> bool:
    """
    Check if the given bytes represent a valid PDF.

    Args:
        data: Bytes to check

    Returns:
        True if valid PDF, False otherwise
    """
    if not data.startswith(PDF_HEADER):
        return False
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError):
        return False
    is_valid = len(doc) > 0
    doc.close()
    return is_valid
