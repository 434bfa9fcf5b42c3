"""
Image utility functions for processing signature images.
"""

import base64
import binascii
from io import BytesIO
from PIL import Image, UnidentifiedImageError


DATA_URL_PREFIX = "data:image/"


def is_data_url(value: str) -> bool:
    """Return True for ``data:image/...`` URIs."""
    return value.startswith(DATA_URL_PREFIX)


def decode_data_url(data_url: str) -> bytes:
    """
    Decode the base64 payload of a ``data:image/...;base64,...`` URI.

    Args:
        data_url: The data URI produced by the signature pad

    Returns:
        Raw image bytes

    Raises:
        ValueError: If the URI has no payload or the payload is not base64
    """
    _, _, payload = data_url.partition(",")
    if not payload:
        raise ValueError("Data URL has no payload")
    try:
        return base64.b64decode(payload, validate=False)
    except binascii.Error as exc:
        raise ValueError(f"Data URL payload is not valid base64: {exc}") from exc


def get_png_size(image_bytes: bytes) -> tuple[int, int]:
    """
    Get the pixel size of a PNG image.

    Args:
        image_bytes: Raw image bytes

    Returns:
        (width, height) in pixels

    Raises:
        ValueError: If the bytes are not a PNG image
    """
    try:
        image = Image.open(BytesIO(image_bytes))
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError(f"Not a readable image: {exc}") from exc
    if image.format != "PNG":
        raise ValueError(f"Only PNG signatures are supported, got {image.format}")
    return image.size
