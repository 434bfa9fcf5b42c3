"""
Form view over the interactive fields of a loaded template.

Field names in the insurer templates are fixed by documents we do not
control, so lookups are by literal name. ``has_field`` lets callers probe
for a field without relying on exceptions.
"""

from __future__ import annotations

import logging
from enum import Enum

import fitz  # pymupdf

from ..exceptions import FieldNotFound, FieldWriteError

logger = logging.getLogger(__name__)


class FieldKind(str, Enum):
    """Kinds of AcroForm field the renderers write to."""
    TEXT = "text"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    CHOICE = "choice"
    OTHER = "other"


_WIDGET_KINDS = {
    fitz.PDF_WIDGET_TYPE_TEXT: FieldKind.TEXT,
    fitz.PDF_WIDGET_TYPE_CHECKBOX: FieldKind.CHECKBOX,
    fitz.PDF_WIDGET_TYPE_RADIOBUTTON: FieldKind.RADIO,
    fitz.PDF_WIDGET_TYPE_COMBOBOX: FieldKind.CHOICE,
    fitz.PDF_WIDGET_TYPE_LISTBOX: FieldKind.CHOICE,
}


def _state_name(state: str | bool | None) -> str:
    if not state or state is True:
        return ""
    return str(state).lstrip("/")


class PdfForm:
    """
    Named-field access to a fillable PDF.

    Widgets are indexed once by field name as (page number, xref) pairs and
    reloaded from their page on every write, so the form stays valid for
    the whole life of the document.
    """

    def __init__(self, doc: fitz.Document):
        self.doc = doc
        self._widgets: dict[str, list[tuple[int, int]]] = {}
        self._kinds: dict[str, FieldKind] = {}
        for page in doc:
            for widget in page.widgets():
                name = widget.field_name
                if not name:
                    continue
                self._widgets.setdefault(name, []).append((page.number, widget.xref))
                self._kinds.setdefault(name, _WIDGET_KINDS.get(widget.field_type, FieldKind.OTHER))

    @property
    def field_names(self) -> list[str]:
        return list(self._widgets)

    def field_kind(self, name: str) -> FieldKind | None:
        return self._kinds.get(name)

    def has_field(self, name: str, kind: FieldKind | None = None) -> bool:
        """True when *name* exists (and, if *kind* is given, is of that kind)."""
        found = self._kinds.get(name)
        if found is None:
            return False
        return kind is None or found == kind

    def set_text(self, name: str, value: str) -> None:
        for widget, _page in self._load(name, FieldKind.TEXT):
            widget.field_value = value
            self._update(widget, name)

    def check(self, name: str) -> None:
        for widget, _page in self._load(name, FieldKind.CHECKBOX):
            widget.field_value = widget.on_state() or True
            self._update(widget, name)

    def select(self, group: str, choice: str) -> None:
        """Turn on the radio button of *group* whose on-state is *choice*."""
        buttons = list(self._load(group, FieldKind.RADIO))
        states = [_state_name(widget.on_state()) for widget, _ in buttons]
        if choice not in states:
            raise FieldNotFound(f"{group}/{choice}", FieldKind.RADIO.value)
        for (widget, _), state in zip(buttons, states):
            if state != choice:
                widget.field_value = False
                self._update(widget, group)
        for (widget, _), state in zip(buttons, states):
            if state == choice:
                widget.field_value = widget.on_state()
                self._update(widget, group)

    def flatten(self) -> None:
        """Bake every widget into static page content."""
        self.doc.bake(annots=False, widgets=True)

    def _load(self, name: str, kind: FieldKind):
        if not self.has_field(name, kind):
            raise FieldNotFound(name, kind.value)
        for page_number, xref in self._widgets[name]:
            page = self.doc[page_number]
            yield page.load_widget(xref), page

    @staticmethod
    def _update(widget: fitz.Widget, name: str) -> None:
        try:
            widget.update()
        except (RuntimeError, ValueError) as exc:
            raise FieldWriteError(f"Could not write field '{name}': {exc}") from exc
