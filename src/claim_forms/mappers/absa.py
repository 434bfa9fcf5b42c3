"""
ABSA certificate of completion (``ABSACertificate.pdf``).

This is the only lenient template: if it is missing or cannot be saved,
the client still gets a page listing what was submitted.
"""

from datetime import date
from typing import Any, Mapping

from ..renderers.signature import BOUNDED, SignatureSpec, signature_keys
from ..schemas.base import FormType
from ..utils.dates import format_date
from .descriptor import TemplateDescriptor
from .rules import IndexedCheckboxes, Radio, Text, Today, to_text

DATE_FORMAT = "Do,MM"

RULES = [
    Text("field-csa-ref", "CSA Ref"),
    Text("field-full-name", "Full name of Insured"),
    Text("field-claim-number", "Claim no"),
    Text("field-property-address", "Property address"),
    Text("field-cause-damage", "Cause of damage"),
    Text("field-staff-name-absa", "IWe confirm that the work undertaken by"),
    Radio("field-excess-paid-absa", "Group1", yes_choice="Choice1", no_choice="Choice2"),
    Today("Text2", DATE_FORMAT),
    # Satisfaction grid: field-checkbox<i> holds the chosen column (1-based)
    IndexedCheckboxes("field-checkbox{i}", 13, "Check Box3.{row}.{col}"),
]

FALLBACK_FIELDS = [
    ("CSA Ref", "field-csa-ref"),
    ("Full Name of Insured", "field-full-name"),
    ("Claim Number", "field-claim-number"),
    ("Property Address", "field-property-address"),
    ("Cause of Damage", "field-cause-damage"),
    ("Staff Name", "field-staff-name-absa"),
    ("Excess Paid", "field-excess-paid-absa"),
]


def fallback_rows(data: Mapping[str, Any]) -> list[tuple[str, str]]:
    rows = [(label, to_text(data.get(key))) for label, key in FALLBACK_FIELDS]
    rows.append(("Date", format_date(date.today(), DATE_FORMAT)))
    return rows


DESCRIPTOR = TemplateDescriptor(
    form_type=FormType.ABSA,
    template_filename="ABSACertificate.pdf",
    label="ABSA",
    rules=RULES,
    signature=SignatureSpec(signature_keys("field-signature-absa"), x=400, y=100, scaling=BOUNDED),
    lenient=True,
    fallback_title="ABSA Certificate",
    fallback_rows=fallback_rows,
)
