"""
SAHL certificate (``sahlld.pdf``).
"""

from ..renderers.signature import BOUNDED, SignatureSpec, signature_keys
from ..schemas.base import FormType
from .descriptor import TemplateDescriptor
from .rules import CROSS, Rating, Text, Today, YesNo

# Question 6 is the workmanship rating, the rest are yes/no
YES_NO_QUESTIONS = [1, 2, 3, 4, 5, 7]

RULES = [
    Text("field-clientname", "ClientName_ZIUG"),
    Text("field-clientref", "ClientRef"),
    Text("field-clientaddress", "ClientAddress"),
    Text("field-clientdamage", "ClientDamage"),
    Text("field-staffname", "StaffName"),
    Text("field-scopework-general", "textarea_26kyol"),
    Today("Date", "MMMM Do, YYYY"),
    *[
        YesNo(
            f"field-checkbox{n}",
            f"CheckBox{n}-1",
            f"CheckBox{n}-2",
            mark=CROSS,
            yes_values=("yes", "y"),
            no_values=("no", "n"),
        )
        for n in YES_NO_QUESTIONS
    ],
    Rating("field-checkbox6", "CheckBox6-{n}", mark=CROSS),
]

DESCRIPTOR = TemplateDescriptor(
    form_type=FormType.SAHL,
    template_filename="sahlld.pdf",
    label="SAHL",
    rules=RULES,
    signature=SignatureSpec(signature_keys("field-signature-sahl"), x=400, y=100, scaling=BOUNDED),
)
