"""
Configuration module for the claim forms service.
Loads environment variables and provides configuration settings.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from .exceptions import TemplateNotFound

# Load .env from the current working directory (where public/forms lives)
load_dotenv(Path.cwd() / ".env")


class Config:
    """Configuration settings for PDF generation."""

    FORMS_DIR: Path = Path(os.getenv("CLAIM_FORMS_FORMS_DIR", "public/forms"))
    TEMP_DIR: Path = Path(os.getenv("CLAIM_FORMS_TEMP_DIR", "temp"))
    SIGNATURE_TIMEOUT: float = float(os.getenv("CLAIM_FORMS_SIGNATURE_TIMEOUT", "10"))
    LOG_LEVEL: str = os.getenv("CLAIM_FORMS_LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """
        Validate that the template directory is usable.

        Raises:
            TemplateNotFound: If FORMS_DIR is not a directory
        """
        if not cls.FORMS_DIR.is_dir():
            raise TemplateNotFound(cls.FORMS_DIR, "template directory does not exist")


config = Config()
