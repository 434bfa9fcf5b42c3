"""Exception hierarchy for claim form PDF generation."""

from pathlib import Path


class ClaimFormsError(Exception):
    """Base exception for all claim form errors."""


class UnsupportedFormType(ClaimFormsError):
    """Raised when a submission names a form with no PDF template."""

    def __init__(self, form_id: str):
        self.form_id = form_id
        super().__init__(f"PDF generation not supported for form type '{form_id}'")


class TemplateNotFound(ClaimFormsError):
    """Raised when a template file is missing, unreadable or not a PDF."""

    def __init__(self, path: Path | str, reason: str = ""):
        self.path = Path(path)
        message = f"PDF template not found: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class FieldError(ClaimFormsError):
    """Base for problems with a single form field; callers skip the field."""


class FieldNotFound(FieldError):
    """Raised when a named field of the requested kind is absent on the template."""

    def __init__(self, name: str, kind: str | None = None):
        self.name = name
        self.kind = kind
        label = f"{kind} field" if kind else "field"
        super().__init__(f"No {label} named '{name}'")


class FieldWriteError(FieldError):
    """Raised when the PDF engine rejects a value for an existing field."""


class SignatureProcessingError(ClaimFormsError):
    """Raised when a signature cannot be fetched, decoded or embedded."""


class RenderError(ClaimFormsError):
    """Raised when the PDF engine fails while filling a loaded template."""


class SerializationError(RenderError):
    """Raised when the filled document cannot be flattened or saved."""


class SubmissionNotFound(ClaimFormsError):
    """Raised when a submission id is unknown to the store."""

    def __init__(self, submission_id: str):
        self.submission_id = submission_id
        super().__init__(f"Form submission not found: {submission_id}")


class SubmissionLimitReached(ClaimFormsError):
    """Raised when a user already has three submissions for a form on a job."""
