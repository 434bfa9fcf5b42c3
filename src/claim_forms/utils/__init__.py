"""
Utility functions for PDF, image and date handling.
"""

from .image_utils import decode_data_url, get_png_size, is_data_url
from .pdf_utils import (
    count_form_fields,
    count_images,
    extract_text_from_pdf,
    is_valid_pdf,
    open_pdf,
)
from .dates import format_date

__all__ = [
    "decode_data_url",
    "get_png_size",
    "is_data_url",
    "count_form_fields",
    "count_images",
    "extract_text_from_pdf",
    "is_valid_pdf",
    "open_pdf",
    "format_date",
]
