"""
Liability waiver (``liabWave.pdf``).
"""

from ..renderers.signature import FLAT, SignatureSpec, signature_keys
from ..schemas.base import FormType
from .descriptor import TemplateDescriptor
from .rules import TICK, Text, Today, YesNo

# (data key, "yes" field, "no" field). The geyser question has no "yes" box
# and the balanced-system "no" box carries a mangled name on the template.
YES_NO_QUESTIONS = [
    ("field-l9wh", "WH_Yes", "WH_No"),
    ("field-additional-work", "WHA_Yes", "WHA_No"),
    ("field-excess-paid-liability", "EI_Yes", "EI_No"),
    ("field-geyser-installed", None, "Geyser_No"),
    ("field-balanced-system", "Balanced_System_Yes", "Balanced_System_YesBalanced_System_No"),
    ("field-nr-valve", "NRValve_Yes", "NRValve_No"),
]

RULES = [
    Today("L_Date", "Do,MM"),
    Text("field-liability-insurance", "L_Insurance"),
    Text("field-liability-claim-number", "L_ClaimNumber"),
    Text("field-client-name", "C_Name"),
    Text("field-plumber-name", "P_Name"),
    *[Text(f"field-l{i}", f"L{i}") for i in range(1, 9)],
    Text("field-old-geyser-liability", "P_KPABEFORE"),
    Text("field-new-geyser-liability", "P_KPAAFTER"),
    Text("field-temp-before-liability", "T_BEFORE"),
    Text("field-temp-after-liability", "T_AFTER"),
    Text("field-general-comments-liability", "textarea_33bxdi"),
    *[YesNo(key, yes, no, mark=TICK) for key, yes, no in YES_NO_QUESTIONS],
]

DESCRIPTOR = TemplateDescriptor(
    form_type=FormType.LIABILITY,
    template_filename="liabWave.pdf",
    label="Liability",
    rules=RULES,
    signature=SignatureSpec(signature_keys("field-signature-liability"), x=400, y=100, scaling=FLAT),
)
