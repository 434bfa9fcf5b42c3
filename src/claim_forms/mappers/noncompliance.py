"""
Non-compliance notice (``Noncompliance.pdf``).

The issue checkboxes on this template were never reliably named, so each
selected issue probes a list of likely names and ticks the first one that
exists as a checkbox.
"""

from ..schemas.base import FormType
from .descriptor import TemplateDescriptor
from .rules import CheckboxChoice, ProbeCheckboxes, Text

PLUMBER_INDEMNITY = {
    "Electric geyser": "EG_PI",
    "Solar geyser": "SG_PI",
    "Heat pump": "HP_PI",
    "Pipe Repairs": "PR_PI",
    "Assessment": "A_PI",
}

QUOTATION = {"YES": "Quote_Y", "NO": "Quote_N"}

ISSUE_FIELD_PATTERNS = [
    "n{n}",
    "checkbox{n}",
    "issue{n}",
    "item{n}",
    "Check Box{n}",
    "CheckBox{n}",
]

RULES = [
    Text("claimNumber", "C_Number"),
    Text("clientName", "C_FName"),
    Text("insuranceName", "I_Name"),
    Text("date", "Date", default_date="YYYY-MM-DD"),
    Text("geyserMake", "Geyser_make"),
    Text("serial", "Geyser_Serial"),
    Text("code", "Geyser_Code"),
    CheckboxChoice("plumberIndemnity", PLUMBER_INDEMNITY),
    CheckboxChoice("quotationAvailable", QUOTATION),
    ProbeCheckboxes("selectedIssues", ISSUE_FIELD_PATTERNS),
]

DESCRIPTOR = TemplateDescriptor(
    form_type=FormType.NONCOMPLIANCE,
    template_filename="Noncompliance.pdf",
    label="Noncompliance",
    rules=RULES,
)
