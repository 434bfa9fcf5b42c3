"""
TemplateDescriptor - everything the renderer needs to know about one form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from ..renderers.signature import SignatureSpec
from ..schemas.base import FormType
from .rules import Rule

FallbackRows = Callable[[Mapping[str, Any]], list[tuple[str, str]]]


@dataclass(frozen=True)
class TemplateDescriptor:
    """
    Configuration for filling one insurer template.

    Attributes:
        form_type: Form id this template renders
        template_filename: File name under the forms directory
        label: Short name used in logs and fallback titles
        rules: Field table applied to the template
        signature: Where the signature goes, or None for unsigned forms
        lenient: Build a plain fallback document instead of failing when
            the template cannot be used
        fallback_title: Title of the fallback document
        fallback_rows: Builds the fallback's (label, value) rows from data
    """

    form_type: FormType
    template_filename: str
    label: str
    rules: Sequence[Rule]
    signature: SignatureSpec | None = None
    lenient: bool = False
    fallback_title: str = ""
    fallback_rows: FallbackRows | None = None
