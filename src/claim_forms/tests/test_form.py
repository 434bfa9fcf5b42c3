"""Tests for the PyMuPDF form view."""

from __future__ import annotations

from pathlib import Path

import fitz  # pymupdf
import pytest

from claim_forms.exceptions import FieldNotFound
from claim_forms.renderers.form import FieldKind, PdfForm

from .conftest import appearance_states, build_acroform_template, build_template


@pytest.fixture
def doc(tmp_path: Path):
    path = build_template(tmp_path / "form.pdf", text_fields=["Name", "Date"], checkboxes=["Agree"])
    document = fitz.open(str(path))
    yield document
    document.close()


def _widget(doc: fitz.Document, name: str) -> fitz.Widget:
    for page in doc:
        for widget in page.widgets():
            if widget.field_name == name:
                return widget
    raise AssertionError(f"no widget {name}")


def test_has_field_checks_kind(doc: fitz.Document) -> None:
    form = PdfForm(doc)
    assert form.has_field("Name")
    assert form.has_field("Name", FieldKind.TEXT)
    assert not form.has_field("Name", FieldKind.CHECKBOX)
    assert form.has_field("Agree", FieldKind.CHECKBOX)
    assert not form.has_field("Missing")
    assert form.field_kind("Missing") is None


def test_set_text(doc: fitz.Document) -> None:
    PdfForm(doc).set_text("Name", "Jane Doe")
    assert _widget(doc, "Name").field_value == "Jane Doe"


def test_set_text_on_checkbox_raises(doc: fitz.Document) -> None:
    with pytest.raises(FieldNotFound):
        PdfForm(doc).set_text("Agree", "X")


def test_check(doc: fitz.Document) -> None:
    PdfForm(doc).check("Agree")
    assert _widget(doc, "Agree").field_value not in ("Off", False, "")


def test_missing_radio_group(doc: fitz.Document) -> None:
    with pytest.raises(FieldNotFound):
        PdfForm(doc).select("Group1", "Choice1")


@pytest.fixture
def radio_doc(tmp_path: Path):
    path = build_acroform_template(
        tmp_path / "radio.pdf", text_fields=["Name"], radios={"Group1": ["Choice1", "Choice2"]}
    )
    document = fitz.open(str(path))
    yield document
    document.close()


def test_select_radio_choice(radio_doc: fitz.Document) -> None:
    form = PdfForm(radio_doc)
    assert form.has_field("Group1", FieldKind.RADIO)

    form.select("Group1", "Choice2")
    assert appearance_states(radio_doc, "Group1") == {"Choice1": "/Off", "Choice2": "/Choice2"}


def test_select_unknown_radio_choice(radio_doc: fitz.Document) -> None:
    with pytest.raises(FieldNotFound):
        PdfForm(radio_doc).select("Group1", "Choice9")


def test_flatten_removes_widgets(doc: fitz.Document) -> None:
    form = PdfForm(doc)
    form.set_text("Name", "Jane Doe")
    form.flatten()
    assert sum(len(list(page.widgets())) for page in doc) == 0
