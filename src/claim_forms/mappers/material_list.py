"""
Material list (``material-list.pdf``).

Reads the nested request body (see ``schemas.requests.MaterialListRequest``)
using dotted keys.
"""

from ..schemas.base import FormType
from .descriptor import TemplateDescriptor
from .rules import BrandMarks, JoinedText, Rows, Text

MAX_SUNDRIES = 15
MAX_ADDITIONAL_MATERIALS = 5

RULES = [
    Text("date", "ML_Date"),
    Text("plumber", "ML_Plumber"),
    Text("claimNumber", "ML_ClaimNumber"),
    Text("insurance", "ML_Insurance"),
    Text("geyser.size", "Geyser_Size"),
    BrandMarks("geyser", "Geyser"),
    Text("dripTray.size", "Drip_Tray"),
    BrandMarks("dripTray", "Drip_Tray"),
    # Both breakers share one size box and the first one's brand boxes
    JoinedText(["vacuumBreaker1.size", "vacuumBreaker2.size"], "Vacumm_B"),
    BrandMarks("vacuumBreaker1", "VB"),
    Text("pressureControlValve.size", "P_CValve"),
    BrandMarks("pressureControlValve", "PCV"),
    Text("nonReturnValve.size", "Non_return"),
    BrandMarks("nonReturnValve", "NRV"),
    Text("fogiPack.size", "Fogi_Pack"),
    Text("extraItem1.name", "Extra_Item"),
    Text("extraItem1.quantity", "Extra_ItemQty"),
    Text("extraItem2.name", "Extra_Item2"),
    Text("extraItem2.quantity", "Extra_ItemQty2"),
    Rows(
        "sundries",
        MAX_SUNDRIES,
        [("name", "Sundries{n}"), ("qtyRequested", "SundriesQR{n}"), ("qtyUsed", "SundriesQU{n}")],
    ),
    Rows(
        "additionalMaterials",
        MAX_ADDITIONAL_MATERIALS,
        [("name", "Added{n}"), ("qtyRequested", "Added{n}_Req"), ("qtyUsed", "Added{n}_Used")],
    ),
]

DESCRIPTOR = TemplateDescriptor(
    form_type=FormType.MATERIAL_LIST,
    template_filename="material-list.pdf",
    label="Material List",
    rules=RULES,
)
