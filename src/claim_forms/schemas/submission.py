"""
FormSubmission - a staff member's filled-in form as stored by the job system.

The ``data`` map is open-ended: its keys depend on which form the client
rendered, so nothing beyond the envelope is validated here.
"""

from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class FormSubmission(BaseModel):
    """A single submission of a form for a job."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    job_id: str = Field(default="", alias="jobId")
    form_id: str = Field(alias="formId")
    submitted_by: str = Field(default="", alias="submittedBy")
    data: dict[str, Any] = Field(default_factory=dict)
    signature: str | None = None
    submitted_at: datetime = Field(default_factory=datetime.now, alias="submittedAt")
    submission_number: int = Field(default=1, ge=1, le=3, alias="submissionNumber")

    @property
    def download_name(self) -> str:
        """Attachment filename used by the submission PDF endpoint."""
        return f"{self.form_id}-submission-{self.submission_number}.pdf"
