"""
Base schemas and types shared by the PDF renderers.
"""

from enum import Enum
from pydantic import BaseModel


class FormType(str, Enum):
    """Forms that have a fillable PDF template."""
    # Insurer certificates
    ABSA = "form-absa-certificate"
    CLEARANCE = "form-clearance-certificate"
    SAHL = "form-sahl-certificate"
    DISCOVERY = "form-discovery-geyser"
    LIABILITY = "form-liability-certificate"
    # Job paperwork
    NONCOMPLIANCE = "noncompliance-form"
    MATERIAL_LIST = "material-list-form"

    @classmethod
    def from_id(cls, form_id: str) -> "FormType | None":
        """Return the member for *form_id*, or None when it is not a known form."""
        try:
            return cls(form_id)
        except ValueError:
            return None


class RenderResult(BaseModel):
    """
    Result of a PDF render.

    Attributes:
        success: Whether a PDF was produced
        form_id: The form id that was requested
        pdf: The flattened PDF bytes (if successful)
        error: Error message (if failed)
        error_type: Name of the failure class (if failed)
    """
    success: bool
    form_id: str
    pdf: bytes | None = None
    error: str | None = None
    error_type: str | None = None
