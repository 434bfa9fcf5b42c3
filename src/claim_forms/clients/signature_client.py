"""
HTTP client for signature images stored behind a URL.
"""

import requests

from ..config import config
from ..exceptions import SignatureProcessingError


class SignatureClient:
    """
    Fetches signature images that were uploaded rather than inlined.

    Signature pads normally produce data URLs; older submissions reference
    an uploaded PNG by URL instead.
    """

    def __init__(self, timeout: float | None = None, session: requests.Session | None = None):
        """
        Initialize the client.

        Args:
            timeout: Request timeout in seconds (defaults to config value)
            session: requests session to reuse (creates one if not provided)
        """
        self.timeout = timeout if timeout is not None else config.SIGNATURE_TIMEOUT
        self.session = session or requests.Session()

    def fetch(self, url: str) -> bytes:
        """
        Download the image at *url*.

        Args:
            url: HTTP(S) URL of the signature image

        Returns:
            Raw response body

        Raises:
            SignatureProcessingError: On non-HTTP URLs, network errors or
                non-2xx responses
        """
        if not url.startswith(("http://", "https://")):
            raise SignatureProcessingError(f"Unsupported signature source: {url[:50]}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise SignatureProcessingError(f"Could not fetch signature: {exc}") from exc
        return response.content
