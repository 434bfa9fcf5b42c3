"""Tests for template loading, field listing and the fallback document."""

from __future__ import annotations

from pathlib import Path

import pytest

from claim_forms.exceptions import TemplateNotFound
from claim_forms.renderers.form import FieldKind, PdfForm
from claim_forms.renderers.template_loader import (
    build_fallback_pdf,
    list_template_fields,
    load_template,
    template_path,
)
from claim_forms.utils.pdf_utils import extract_text_from_pdf, is_valid_pdf

from .conftest import build_template


def test_template_path_uses_forms_dir(tmp_path: Path) -> None:
    assert template_path("sahlld.pdf", tmp_path) == tmp_path / "sahlld.pdf"


def test_missing_template(tmp_path: Path) -> None:
    path = tmp_path / "missing.pdf"
    with pytest.raises(TemplateNotFound) as exc_info:
        load_template(path)
    assert exc_info.value.path == path


def test_non_pdf_template(tmp_path: Path) -> None:
    path = tmp_path / "broken.pdf"
    path.write_text("not a pdf")
    with pytest.raises(TemplateNotFound):
        load_template(path)


def test_load_template(forms_dir: Path) -> None:
    doc = load_template(forms_dir / "sahlld.pdf")
    try:
        form = PdfForm(doc)
        assert "ClientName_ZIUG" in form.field_names
        assert form.field_kind("ClientName_ZIUG") is FieldKind.TEXT
    finally:
        doc.close()


def test_list_template_fields(tmp_path: Path) -> None:
    path = build_template(tmp_path / "t.pdf", text_fields=["Name"], checkboxes=["Agree"])
    assert list_template_fields(path) == {"Name": "text", "Agree": "checkbox"}


def test_fallback_pdf_lists_non_empty_rows() -> None:
    pdf = build_fallback_pdf("ABSA Certificate", [("Claim Number", "C-1"), ("CSA Ref", "")])
    assert is_valid_pdf(pdf)
    text = extract_text_from_pdf(pdf)
    assert "ABSA Certificate" in text
    assert "Claim Number: C-1" in text
    assert "CSA Ref" not in text


def test_fallback_pdf_drops_rows_past_the_margin() -> None:
    rows = [(f"Row {i}", "v") for i in range(40)]
    text = extract_text_from_pdf(build_fallback_pdf("Long", rows))
    # rows start at y=700 and stop once y reaches 50
    assert "Row 25: v" in text
    assert "Row 26: v" not in text
