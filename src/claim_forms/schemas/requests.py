"""
Request payloads for the form-specific PDF endpoints.

These forms are not stored as submissions: the client posts (or puts in the
query string) everything the template needs in one go.
"""

import json
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


Quantity = int | float | str | None


class BrandedItem(BaseModel):
    """A fitted part with a size and the brand ticked by the plumber."""
    model_config = ConfigDict(populate_by_name=True)

    size: str = ""
    kwikot: bool = False
    heat_tech: bool = Field(default=False, alias="heatTech")
    techron: bool = False


class ExtraItem(BaseModel):
    """Free-form extra item line."""
    name: str = ""
    quantity: Quantity = None


class MaterialRow(BaseModel):
    """One row of the sundries or additional materials tables."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    qty_requested: Quantity = Field(default=None, alias="qtyRequested")
    qty_used: Quantity = Field(default=None, alias="qtyUsed")


class MaterialListRequest(BaseModel):
    """Body of ``POST /api/fill-material-list-pdf``."""
    model_config = ConfigDict(populate_by_name=True)

    date: str = ""
    plumber: str = ""
    claim_number: str = Field(default="", alias="claimNumber")
    insurance: str = ""
    geyser: BrandedItem = Field(default_factory=BrandedItem)
    drip_tray: BrandedItem = Field(default_factory=BrandedItem, alias="dripTray")
    vacuum_breaker1: BrandedItem = Field(default_factory=BrandedItem, alias="vacuumBreaker1")
    vacuum_breaker2: BrandedItem = Field(default_factory=BrandedItem, alias="vacuumBreaker2")
    pressure_control_valve: BrandedItem = Field(default_factory=BrandedItem, alias="pressureControlValve")
    non_return_valve: BrandedItem = Field(default_factory=BrandedItem, alias="nonReturnValve")
    fogi_pack: BrandedItem = Field(default_factory=BrandedItem, alias="fogiPack")
    extra_item1: ExtraItem = Field(default_factory=ExtraItem, alias="extraItem1")
    extra_item2: ExtraItem = Field(default_factory=ExtraItem, alias="extraItem2")
    sundries: list[MaterialRow] = Field(default_factory=list)
    additional_materials: list[MaterialRow] = Field(default_factory=list, alias="additionalMaterials")

    @field_validator(
        "geyser", "drip_tray", "vacuum_breaker1", "vacuum_breaker2",
        "pressure_control_valve", "non_return_valve", "fogi_pack",
        "extra_item1", "extra_item2",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("sundries", "additional_materials", mode="before")
    @classmethod
    def _none_as_no_rows(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_form_data(self) -> dict[str, Any]:
        """Dump with the client's camelCase keys, which the field table reads."""
        return self.model_dump(by_alias=True)


class NoncomplianceRequest(BaseModel):
    """Query parameters of ``GET /api/generate-noncompliance-pdf/{id}``."""
    model_config = ConfigDict(populate_by_name=True)

    claim_number: str = Field(default="", alias="claimNumber")
    client_name: str = Field(default="", alias="clientName")
    insurance_name: str = Field(default="", alias="insuranceName")
    date: str = ""
    geyser_make: str = Field(default="", alias="geyserMake")
    serial: str = ""
    code: str = ""
    plumber_indemnity: str = Field(default="", alias="plumberIndemnity")
    quotation_available: str = Field(default="", alias="quotationAvailable")
    selected_issues: list[int] = Field(default_factory=list, alias="selectedIssues")

    @field_validator("selected_issues", mode="before")
    @classmethod
    def _parse_selected_issues(cls, value: Any) -> Any:
        """The client sends the indices as a JSON array string."""
        if value is None or value == "":
            return []
        if isinstance(value, str):
            return json.loads(value)
        return value

    def to_form_data(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
