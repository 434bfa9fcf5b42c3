"""
Temporary files backing the download endpoints.

A rendered PDF is written under the temp directory, streamed to the client
and removed once the stream ends, whether it finished, failed or was
aborted by the client.
"""

import logging
import time
import uuid
from pathlib import Path
from typing import Iterator

from .config import config

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def write_temp_pdf(pdf_bytes: bytes, stem: str, temp_dir: Path | None = None) -> Path:
    """
    Write *pdf_bytes* to ``<temp_dir>/<stem>_<epoch ms>_<random>.pdf``.

    The file is created exclusively, so concurrent downloads of the same
    form never share a path.

    Args:
        pdf_bytes: Rendered PDF
        stem: File name prefix, e.g. ``SAHLReport_filled``
        temp_dir: Target directory (defaults to config value, created if missing)

    Returns:
        Path of the written file
    """
    directory = Path(temp_dir or config.TEMP_DIR)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{stem}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}.pdf"
    with open(path, "xb") as f:
        f.write(pdf_bytes)
    logger.debug("Wrote temporary PDF %s", path)
    return path


def remove_temp_file(path: Path) -> None:
    """Delete *path*; failures are logged and never raised."""
    try:
        Path(path).unlink(missing_ok=True)
    except OSError as exc:
        logger.error("Error deleting temporary file %s: %s", path, exc)


def iter_file_and_remove(path: Path, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield the contents of *path* in chunks, then delete it.

    The file is removed when the generator is exhausted, raises, or is
    closed early.
    """
    try:
        with open(path, "rb") as f:
            while chunk := f.read(chunk_size):
                yield chunk
    finally:
        remove_temp_file(path)
