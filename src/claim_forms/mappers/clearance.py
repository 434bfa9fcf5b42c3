"""
BBP clearance certificate (``BBPClearanceCertificate.pdf``).
"""

from ..renderers.signature import BOUNDED, SignatureSpec, signature_keys
from ..schemas.base import FormType
from .descriptor import TemplateDescriptor
from .rules import CROSS, OtherText, Rating, Text, Today, YesNo

# (data key, "yes" field, "no" field); the template's names are irregular
QUALITY_QUESTIONS = [
    ("field-cquality1", "CQuality1yes", "CQuality1"),
    ("field-cquality2", "CQuality2yes", "CQuality2No"),
    ("field-cquality3", "CQuality3Yes", "CQuality3No"),
    ("field-cquality4", "CQuality4Yes", "CQuality4No"),
    ("field-cquality5", "CQuality5Yes", "CQuality5No"),
]

RULES = [
    Text("field-cname", "CName"),
    Text("field-cref", "CRef"),
    Text("field-caddress", "CAddress"),
    Text("field-cdamage", "CDamage"),
    Text("field-gcomments", "GComments"),
    Text("field-scopework", "ScopeWork"),
    OtherText("field-oldgeyser", "field-oldgeyser-details", "OLDGEYSER"),
    OtherText("field-newgeyser", "field-newgeyser-details", "NEWGEYSER"),
    Text("field-staff", "Staff"),
    Today("Date_UAAD", "MMMM Do, YYYY"),
    *[YesNo(key, yes, no, mark=CROSS) for key, yes, no in QUALITY_QUESTIONS],
    # Workmanship rating
    Rating("field-cquality6", "CQuality6={n}", mark=CROSS),
    YesNo("field-excess", "Excess=Yes", "Excess=No", mark=CROSS),
    Text("field-amount", "Excess"),
]

DESCRIPTOR = TemplateDescriptor(
    form_type=FormType.CLEARANCE,
    template_filename="BBPClearanceCertificate.pdf",
    label="Clearance",
    rules=RULES,
    signature=SignatureSpec(signature_keys("field-signature-clearance"), x=400, y=150, scaling=BOUNDED),
)
