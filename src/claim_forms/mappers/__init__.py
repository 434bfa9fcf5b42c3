"""
Field tables for every supported template.
"""

from ..schemas.base import FormType
from . import absa, clearance, discovery, liability, material_list, noncompliance, sahl
from .descriptor import TemplateDescriptor
from .rules import apply_rules

# Registry of templates by form type
TEMPLATES: dict[FormType, TemplateDescriptor] = {
    FormType.ABSA: absa.DESCRIPTOR,
    FormType.CLEARANCE: clearance.DESCRIPTOR,
    FormType.SAHL: sahl.DESCRIPTOR,
    FormType.DISCOVERY: discovery.DESCRIPTOR,
    FormType.LIABILITY: liability.DESCRIPTOR,
    FormType.NONCOMPLIANCE: noncompliance.DESCRIPTOR,
    FormType.MATERIAL_LIST: material_list.DESCRIPTOR,
}

__all__ = ["TEMPLATES", "TemplateDescriptor", "apply_rules"]
