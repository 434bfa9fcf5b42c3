"""
Clients for external resources used while rendering.
"""

from .signature_client import SignatureClient

__all__ = ["SignatureClient"]
