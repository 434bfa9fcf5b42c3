"""
Schemas module for submission payloads and render results.
"""

from .base import FormType, RenderResult
from .submission import FormSubmission
from .requests import MaterialListRequest, MaterialRow, NoncomplianceRequest

__all__ = [
    "FormType",
    "RenderResult",
    "FormSubmission",
    "MaterialListRequest",
    "MaterialRow",
    "NoncomplianceRequest",
]
