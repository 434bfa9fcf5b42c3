"""Shared fixtures: synthetic templates and signature images."""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path

import fitz  # pymupdf
import pytest
from PIL import Image
from reportlab.pdfgen import canvas

from claim_forms.config import config

TEXT = fitz.PDF_WIDGET_TYPE_TEXT
CHECKBOX = fitz.PDF_WIDGET_TYPE_CHECKBOX

ROWS_PER_COLUMN = 48
COLUMNS_PER_PAGE = 4


def build_template(
    path: Path,
    text_fields: list[str] = (),
    checkboxes: list[str] = (),
) -> Path:
    """Write a one-or-more page PDF with the given widgets laid out in a grid."""
    fields = [(name, TEXT) for name in text_fields] + [(name, CHECKBOX) for name in checkboxes]
    per_page = ROWS_PER_COLUMN * COLUMNS_PER_PAGE

    doc = fitz.open()
    page = None
    for i, (name, field_type) in enumerate(fields):
        slot = i % per_page
        if slot == 0:
            page = doc.new_page(width=612, height=792)
        column, row = divmod(slot, ROWS_PER_COLUMN)
        x = 20 + column * 148
        y = 20 + row * 15
        widget = fitz.Widget()
        widget.field_name = name
        widget.field_type = field_type
        widget.rect = fitz.Rect(x, y, x + (140 if field_type == TEXT else 12), y + 12)
        if field_type == TEXT:
            widget.field_value = ""
            widget.text_fontsize = 8
        page.add_widget(widget)
    if page is None:
        doc.new_page(width=612, height=792)

    path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(path))
    doc.close()
    return path


def build_acroform_template(
    path: Path,
    text_fields: list[str] = (),
    checkboxes: list[str] = (),
    radios: dict[str, list[str]] | None = None,
) -> Path:
    """Write a one-page PDF drawn with reportlab, which can also emit radio groups."""
    path.parent.mkdir(parents=True, exist_ok=True)
    pdf = canvas.Canvas(str(path), pagesize=(612, 792))
    form = pdf.acroForm
    y = 760
    for name in text_fields:
        form.textfield(name=name, value="", x=20, y=y, width=200, height=14, fontSize=8)
        y -= 20
    for name in checkboxes:
        form.checkbox(name=name, checked=False, x=20, y=y, size=12)
        y -= 20
    for group, choices in (radios or {}).items():
        for choice in choices:
            form.radio(name=group, value=choice, selected=False, x=20, y=y, size=12)
            y -= 20
    pdf.showPage()
    pdf.save()
    return path


def appearance_states(doc: fitz.Document, name: str) -> dict[str, str]:
    """Map each widget of field *name* from its on-state to its current /AS value."""
    states = {}
    for page in doc:
        for widget in page.widgets():
            if widget.field_name == name:
                on_state = str(widget.on_state()).lstrip("/")
                states[on_state] = doc.xref_get_key(widget.xref, "AS")[1]
    return states


@pytest.fixture
def forms_dir(tmp_path: Path) -> Path:
    """Templates with a representative subset of each insurer's fields."""
    directory = tmp_path / "forms"
    build_template(
        directory / "sahlld.pdf",
        text_fields=["ClientName_ZIUG", "ClientRef", "Date", "CheckBox1-1", "CheckBox1-2", "CheckBox6-8"],
    )
    build_template(
        directory / "BBPClearanceCertificate.pdf",
        text_fields=["CName", "CRef", "OLDGEYSER", "Date_UAAD", "Excess", "Excess=Yes", "Excess=No"],
    )
    build_template(
        directory / "DiscoveryCS.pdf",
        text_fields=[
            "ClaimNo", "ClientName", "Date", "geyserreplaced_Y", "geyserreplaced_N",
            "geyserSize100", "geyserSize150", "INSTALLEDgeyserYES", "INSTALLEDgeyserNO",
        ],
    )
    build_template(
        directory / "liabWave.pdf",
        text_fields=["L_Date", "C_Name", "P_Name", "WH_Yes", "WH_No"],
    )
    build_template(
        directory / "Noncompliance.pdf",
        text_fields=["C_Number", "C_FName", "Date"],
        checkboxes=["EG_PI", "Quote_Y", "Quote_N", "n1", "n3"],
    )
    build_template(
        directory / "material-list.pdf",
        text_fields=[
            "ML_Date", "ML_Plumber", "ML_ClaimNumber", "Geyser_Size", "Geyser_Kwikot",
            *[f"Sundries{n}" for n in range(1, 16)],
        ],
    )
    build_template(
        directory / "ABSACertificate.pdf",
        text_fields=["CSA Ref", "Full name of Insured", "Claim no", "Text2"],
        checkboxes=[f"Check Box3.{row}.{col}" for row in (2, 3) for col in range(4)],
    )
    return directory


@pytest.fixture
def use_forms_dir(forms_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configured template directory at the synthetic templates."""
    monkeypatch.setattr(config, "FORMS_DIR", forms_dir)
    return forms_dir


@pytest.fixture
def temp_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "temp"
    monkeypatch.setattr(config, "TEMP_DIR", directory)
    return directory


def _image_bytes(fmt: str, size: tuple[int, int] = (300, 120)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, (20, 20, 20)).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    return _image_bytes("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return _image_bytes("JPEG")


@pytest.fixture
def png_data_url(png_bytes: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def jpeg_data_url(jpeg_bytes: bytes) -> str:
    return "data:image/jpeg;base64," + base64.b64encode(jpeg_bytes).decode("ascii")
