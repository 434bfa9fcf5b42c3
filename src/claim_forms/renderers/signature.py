"""
Signature embedding for the insurer certificates.

Each certificate draws the client's signature at a fixed spot on its first
page. Two sizing conventions are in use and are kept per template:

* ``bounded``: fit the image in 150x60 points, never above half size
* ``flat``: a plain 0.3 scale factor, however large the image is

Embedding is best-effort. A signature that cannot be fetched or decoded is
logged and the certificate is produced without it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import fitz  # pymupdf

from ..clients.signature_client import SignatureClient
from ..exceptions import SignatureProcessingError
from ..utils.image_utils import decode_data_url, get_png_size, is_data_url

logger = logging.getLogger(__name__)

BOUNDED = "bounded"
FLAT = "flat"


@dataclass(frozen=True)
class SignatureSpec:
    """Where and how large a template draws its signature."""

    keys: Sequence[str]
    x: float
    y: float
    scaling: str = BOUNDED  # bounded | flat
    max_width: float = 150
    max_height: float = 60
    cap_scale: float = 0.5
    flat_scale: float = 0.3
    page_index: int = 0


def signature_keys(alias: str) -> tuple[str, ...]:
    """Legacy lookup order: generic key, generic field key, then the template alias."""
    return ("signature", "field-signature", alias)


def resolve_signature(
    data: Mapping[str, Any],
    keys: Sequence[str],
    fallback: str | None = None,
) -> str | None:
    """
    Pick the signature value for a submission.

    Args:
        data: Submission data
        keys: Candidate keys in priority order
        fallback: Value used when no key is present (the submission's own
            ``signature`` attribute)

    Returns:
        The first non-empty value, or None
    """
    for key in keys:
        value = data.get(key)
        if value:
            return str(value)
    return fallback or None


def load_signature_bytes(value: str, client: SignatureClient | None = None) -> bytes:
    """
    Turn a signature value into image bytes.

    Args:
        value: A ``data:image/...;base64,...`` URI or an HTTP(S) URL
        client: Client used for URLs (creates one if not provided)

    Returns:
        Raw image bytes

    Raises:
        SignatureProcessingError: If the value cannot be decoded or fetched
    """
    if is_data_url(value):
        try:
            return decode_data_url(value)
        except ValueError as exc:
            raise SignatureProcessingError(str(exc)) from exc
    return (client or SignatureClient()).fetch(value)


def signature_size(width: float, height: float, spec: SignatureSpec) -> tuple[float, float]:
    """Drawn size in points for an image of *width* x *height* pixels."""
    if width <= 0 or height <= 0:
        raise SignatureProcessingError(f"Invalid signature size {width}x{height}")
    if spec.scaling == FLAT:
        scale = spec.flat_scale
    else:
        scale = min(spec.max_width / width, spec.max_height / height, spec.cap_scale)
    return width * scale, height * scale


def placement_rect(page: fitz.Page, x: float, y: float, width: float, height: float) -> fitz.Rect:
    """
    Convert a bottom-left anchored box in PDF user space to a PyMuPDF rect.

    The template positions are measured from the bottom-left corner of the
    page while PyMuPDF measures from the top-left.
    """
    page_height = page.rect.height
    return fitz.Rect(x, page_height - y - height, x + width, page_height - y)


def draw_signature(doc: fitz.Document, image_bytes: bytes, spec: SignatureSpec) -> fitz.Rect:
    """
    Draw PNG *image_bytes* on the template page given by *spec*.

    Raises:
        SignatureProcessingError: If the image is not a PNG or cannot be placed
    """
    try:
        width, height = get_png_size(image_bytes)
    except ValueError as exc:
        raise SignatureProcessingError(str(exc)) from exc

    draw_width, draw_height = signature_size(width, height, spec)
    try:
        page = doc[spec.page_index]
        rect = placement_rect(page, spec.x, spec.y, draw_width, draw_height)
        page.insert_image(rect, stream=image_bytes, keep_proportion=False)
    except (IndexError, RuntimeError, ValueError) as exc:
        raise SignatureProcessingError(f"Could not draw signature: {exc}") from exc
    return rect


def embed_signature(
    doc: fitz.Document,
    value: str | None,
    spec: SignatureSpec,
    client: SignatureClient | None = None,
    label: str = "",
) -> bool:
    """
    Fetch/decode *value* and draw it on *doc*; never raises.

    Returns:
        True if a signature image was drawn
    """
    if not value:
        logger.info("No signature found in %s form data", label or "submitted")
        return False

    logger.info("Processing signature for %s PDF: %s...", label, value[:50])
    try:
        image_bytes = load_signature_bytes(value, client)
        rect = draw_signature(doc, image_bytes, spec)
    except SignatureProcessingError as exc:
        logger.warning("Could not add signature to %s PDF: %s", label, exc)
        return False

    logger.info("Added signature to %s PDF at %s", label, rect)
    return True
