"""
Discovery geyser claim sheet (``DiscoveryCS.pdf``).

Every tick box on this template is a text field that takes an ``X``.
"""

from ..renderers.signature import FLAT, SignatureSpec, signature_keys
from ..schemas.base import FormType
from .descriptor import TemplateDescriptor
from .rules import EqualsMark, SizeMarks, SuffixMark, Text, YesElseNo

GEYSER_SIZES = ["50", "100", "150", "200", "250", "300", "350"]

INSTALLED_ITEMS = {
    "field-item-geyser": "INSTALLEDgeyser",
    "field-item-drip-tray": "INSTALLEDDrip",
    "field-item-vacuum-breakers": "INSTALLEDVB",
    "field-item-platform": "INSTALLEDPlatform",
    "field-item-bonding": "INSTALLEDBonding",
    "field-item-isolator": "INSTALLEDIsolator",
    "field-item-pressure-valve": "INSTALLEDPCV",
    "field-item-relocated": "INSTALLEDRelocated",
    "field-item-thermostat": "INSTALLEDThermostat",
    "field-item-element": "INSTALLEDElement",
    "field-item-safety-valve": "INSTALLEDSafetyValve",
    "field-item-non-return": "INSTALLEDNonreturn",
}

SOLAR_ITEMS = {
    "field-solar-vacuum-tubes": "SOLARVacuumTubes",
    "field-solar-flat-panels": "SOLARFlatPanels",
    "field-solar-circulation-pump": "SOLARCirculationPump",
    "field-solar-geyser-wise": "SOLARGeyserWise",
    "field-solar-mixing-valve": "SOLARMixingValve",
    "field-solar-panel-12v": "SOLAR12VPanel",
}

RULES = [
    Text("field-claim-number", "ClaimNo"),
    Text("field-client-name", "ClientName"),
    Text("field-date", "Date", default_date="MMMM Do, YYYY"),
    Text("field-address", "Address"),
    Text("field-company-name", "company"),
    Text("field-plumber-name", "staff"),
    Text("field-license-number", "license number"),
    # Action taken
    YesElseNo("field-geyser-replaced", "geyserreplaced_Y", "geyserreplaced_N"),
    YesElseNo("field-geyser-repair", "geyserrepaired_Y", "geyserrepaired_N"),
    # Old geyser
    EqualsMark("field-old-geyser-type", "ELECTRICgeyser", "electric", lower=True),
    EqualsMark("field-old-geyser-type", "SOLARgeyser", "solar", lower=True),
    EqualsMark("field-old-geyser-type", "OTHERgeyser", "other", lower=True),
    Text("field-old-geyser-other", "OTHERgeyserspecs"),
    SizeMarks("field-old-geyser-size", "geyserSize{size}", GEYSER_SIZES),
    EqualsMark("field-old-geyser-make", "HeatTechgeyser", "Heat Tech"),
    EqualsMark("field-old-geyser-make", "KwiKotgeyser", "Kwikot"),
    EqualsMark("field-old-geyser-make", "OtherTypegeyser", "Other"),
    Text("field-old-serial-number", "serialgeyser"),
    Text("field-old-code", "geysercode"),
    Text("field-old-no-tag", "notag"),
    EqualsMark("field-wall-mounted", "wallmountedgeyser", "Y"),
    EqualsMark("field-inside-roof", "inroofgeyser", "Y"),
    Text("field-other-location", "OtherAreageyser"),
    # New geyser
    EqualsMark("field-new-geyser-type", "newgeyserELECTRIC", "electric", lower=True),
    EqualsMark("field-new-geyser-type", "newgeyserSOLAR", "solar", lower=True),
    EqualsMark("field-new-geyser-type", "newgeyserOTHER", "other", lower=True),
    Text("field-new-geyser-other", "newgeyserOTHERTEXT"),
    SizeMarks("field-new-geyser-size", "NEWgeyserSize{size}", GEYSER_SIZES),
    EqualsMark("field-new-geyser-make", "newgeyserHEATECH", "Heat Tech"),
    EqualsMark("field-new-geyser-make", "newgeyserKWIKOT", "Kwikot"),
    Text("field-new-serial-number", "NEWserialgeyser"),
    Text("field-new-code", "NEWgeysercode"),
    # Installed and solar items, each Y / N / NA
    *[SuffixMark(key, prefix) for key, prefix in INSTALLED_ITEMS.items()],
    *[SuffixMark(key, prefix) for key, prefix in SOLAR_ITEMS.items()],
]

DESCRIPTOR = TemplateDescriptor(
    form_type=FormType.DISCOVERY,
    template_filename="DiscoveryCS.pdf",
    label="Discovery",
    rules=RULES,
    signature=SignatureSpec(signature_keys("field-signature-discovery"), x=400, y=200, scaling=FLAT),
)
