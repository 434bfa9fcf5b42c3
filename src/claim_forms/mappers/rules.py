"""
Declarative field rules and the engine that applies them to a form.

Every template is described by a list of rules. A rule reads one or more
keys from the submitted data and writes to literal field names of the
template. Fields the template does not have are logged and skipped; the
remaining rules still run.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Protocol, Sequence

from ..exceptions import FieldError
from ..renderers.form import FieldKind
from ..utils.dates import format_date

logger = logging.getLogger(__name__)

CROSS = "X"
TICK = "✔"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class Form(Protocol):
    """What the rules need from a loaded template."""

    def has_field(self, name: str, kind: FieldKind | None = None) -> bool: ...

    def set_text(self, name: str, value: str) -> None: ...

    def check(self, name: str) -> None: ...

    def select(self, group: str, choice: str) -> None: ...


def to_text(value: Any) -> str:
    """Render a submitted value the way the web client would print it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_leading_int(value: Any) -> int | None:
    """Integer prefix of *value* ('7', ' 7 ', '7.5' -> 7), None if there is none."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def lookup(data: Mapping[str, Any], key: str) -> Any:
    """
    Read *key* from *data*.

    Keys are tried literally first; ``a.b`` falls back to ``data["a"]["b"]``
    for the nested request bodies.
    """
    if key in data:
        return data[key]
    if "." not in key:
        return None
    current: Any = data
    for part in key.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
    return current


class FormFiller:
    """
    Writes values to a form one field at a time.

    A field the template lacks (or rejects) is logged and recorded in
    ``skipped``; it never stops the other writes.
    """

    def __init__(self, form: Form, label: str = ""):
        self.form = form
        self.label = label
        self.written: list[str] = []
        self.skipped: list[str] = []
        self.today = date.today()

    def has(self, name: str, kind: FieldKind | None = None) -> bool:
        return self.form.has_field(name, kind)

    def text(self, name: str, value: str) -> bool:
        return self._guard(name, self.form.set_text, name, value)

    def check(self, name: str) -> bool:
        return self._guard(name, self.form.check, name)

    def select(self, group: str, choice: str) -> bool:
        return self._guard(group, self.form.select, group, choice)

    def missing(self, name: str, reason: str = "") -> None:
        """Record a field that was probed for and not found."""
        logger.warning("%s field %s not found in PDF%s", self.label, name, f" ({reason})" if reason else "")
        self.skipped.append(name)

    def _guard(self, name: str, write, *args) -> bool:
        try:
            write(*args)
        except FieldError as exc:
            logger.warning("%s: skipping field %s: %s", self.label, name, exc)
            self.skipped.append(name)
            return False
        self.written.append(name)
        return True


# ── Text ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Text:
    """One data key to one text field; empty when missing."""

    key: str
    field: str
    default_date: str | None = None  # moment-style format used when the key is empty

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        value = to_text(lookup(data, self.key))
        if not value and self.default_date:
            value = format_date(filler.today, self.default_date)
        filler.text(self.field, value)


@dataclass(frozen=True)
class OtherText:
    """Selector with an "Other" option backed by a free-text detail key."""

    key: str
    detail_key: str
    field: str

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        value = to_text(lookup(data, self.key))
        if value == "Other":
            value = to_text(lookup(data, self.detail_key))
        filler.text(self.field, value)


@dataclass(frozen=True)
class JoinedText:
    """Several keys joined with spaces into one field."""

    keys: Sequence[str]
    field: str

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        value = " ".join(to_text(lookup(data, key)) for key in self.keys).strip()
        filler.text(self.field, value)


@dataclass(frozen=True)
class Today:
    """Today's date in a fixed format."""

    field: str
    fmt: str

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        filler.text(self.field, format_date(filler.today, self.fmt))


# ── Marks ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class YesNo:
    """
    A yes/no answer drawn as a mark in one of two text fields.

    Only the field matching the answer is written; anything else leaves
    both alone. A ``None`` field name means the template has no box for
    that answer.
    """

    key: str
    yes: str | None
    no: str | None
    mark: str = CROSS
    yes_values: Sequence[str] = ("yes",)
    no_values: Sequence[str] = ("no",)

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        value = to_text(lookup(data, self.key)).lower()
        if value in self.yes_values and self.yes:
            filler.text(self.yes, self.mark)
        elif value in self.no_values and self.no:
            filler.text(self.no, self.mark)


@dataclass(frozen=True)
class YesElseNo:
    """A ``Y`` answer marks the yes field; anything else marks the no field."""

    key: str
    yes: str
    no: str
    mark: str = CROSS

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        if to_text(lookup(data, self.key)).upper() == "Y":
            filler.text(self.yes, self.mark)
        else:
            filler.text(self.no, self.mark)


@dataclass(frozen=True)
class Rating:
    """A 1-10 rating marking one of ten fields named by *pattern*."""

    key: str
    pattern: str  # formatted with n=<rating>
    mark: str = CROSS
    low: int = 1
    high: int = 10

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        rating = parse_leading_int(lookup(data, self.key))
        if rating is None or not self.low <= rating <= self.high:
            return
        filler.text(self.pattern.format(n=rating), self.mark)


@dataclass(frozen=True)
class EqualsMark:
    """Mark when the value equals *expected*, clear the field otherwise."""

    key: str
    field: str
    expected: str
    mark: str = CROSS
    lower: bool = False

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        value = to_text(lookup(data, self.key))
        if self.lower:
            value = value.lower()
        filler.text(self.field, self.mark if value == self.expected else "")


@dataclass(frozen=True)
class SizeMarks:
    """
    One field per size in *sizes*; the submitted size marks its field.

    ``"100"`` and ``"100L"`` both select size 100. Sizes the template has no
    field for are skipped.
    """

    key: str
    pattern: str  # formatted with size=<size>
    sizes: Sequence[str]
    mark: str = CROSS

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        value = to_text(lookup(data, self.key))
        for size in self.sizes:
            name = self.pattern.format(size=size)
            if not filler.has(name, FieldKind.TEXT):
                filler.missing(name)
                continue
            selected = value in (size, f"{size}L")
            filler.text(name, self.mark if selected else "")


@dataclass(frozen=True)
class SuffixMark:
    """Y/N/other answers marking ``<prefix>YES``, ``<prefix>NO`` or ``<prefix>NA``."""

    key: str
    prefix: str
    mark: str = CROSS

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        value = to_text(lookup(data, self.key)).upper()
        if value in ("Y", "YES"):
            suffix = "YES"
        elif value in ("N", "NO"):
            suffix = "NO"
        else:
            suffix = "NA"
        name = self.prefix + suffix
        if filler.has(name, FieldKind.TEXT):
            filler.text(name, self.mark)
        else:
            filler.missing(name, f"{self.key}={value}")


@dataclass(frozen=True)
class BrandMarks:
    """Brand flags of a fitted part, ticked in ``<prefix>_<Brand>`` fields."""

    key: str
    prefix: str
    mark: str = TICK
    brands: Sequence[tuple[str, str]] = (
        ("kwikot", "Kwikot"),
        ("heatTech", "HeatTech"),
        ("techron", "Techron"),
    )

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        item = lookup(data, self.key)
        if not isinstance(item, Mapping):
            return
        for flag, brand in self.brands:
            if item.get(flag):
                filler.text(f"{self.prefix}_{brand}", self.mark)


# ── Checkboxes and radio groups ──────────────────────────────────────


@dataclass(frozen=True)
class Radio:
    """Select *yes_choice* when the answer is yes, *no_choice* otherwise."""

    key: str
    group: str
    yes_choice: str
    no_choice: str

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        answer = to_text(lookup(data, self.key)).lower()
        filler.select(self.group, self.yes_choice if answer == "yes" else self.no_choice)


@dataclass(frozen=True)
class CheckboxChoice:
    """Check the checkbox mapped to the submitted value, if any."""

    key: str
    choices: Mapping[str, str]

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        name = self.choices.get(to_text(lookup(data, self.key)))
        if name:
            filler.check(name)


@dataclass(frozen=True)
class IndexedCheckboxes:
    """
    Numbered keys each selecting a column in a checkbox grid.

    For i in 1..count, a positive value v of ``key_pattern(i)`` checks
    ``field_pattern(row=i + 1, col=v - 1)``.
    """

    key_pattern: str  # formatted with i=<1..count>
    count: int
    field_pattern: str  # formatted with row=, col=

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        for i in range(1, self.count + 1):
            value = parse_leading_int(lookup(data, self.key_pattern.format(i=i)))
            if value is None or value <= 0:
                continue
            filler.check(self.field_pattern.format(row=i + 1, col=value - 1))


@dataclass(frozen=True)
class ProbeCheckboxes:
    """
    Zero-based indices, each checking the first existing checkbox among
    several candidate names.
    """

    key: str
    patterns: Sequence[str]  # formatted with n=<index + 1>, tried in order

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        for index in self._indices(filler, lookup(data, self.key)):
            candidates = [pattern.format(n=index + 1) for pattern in self.patterns]
            name = next((c for c in candidates if filler.has(c, FieldKind.CHECKBOX)), None)
            if name is None:
                filler.missing(f"checkbox #{index + 1}", "tried " + ", ".join(candidates))
                continue
            filler.check(name)

    def _indices(self, filler: FormFiller, raw: Any) -> list[int]:
        if raw is None or raw == "":
            return []
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except ValueError:
                logger.warning("%s: %s is not a JSON list: %r", filler.label, self.key, raw[:50])
                return []
        if not isinstance(raw, (list, tuple)):
            raw = [raw]
        indices = []
        for item in raw:
            index = parse_leading_int(item)
            if index is None or index < 0:
                logger.warning("%s: ignoring %s entry %r", filler.label, self.key, item)
                continue
            indices.append(index)
        return indices


# ── Repeating rows ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Rows:
    """
    A list of row objects written to numbered field families.

    Rows past *limit* have no fields on the template and are dropped.
    """

    key: str
    limit: int
    columns: Sequence[tuple[str, str]]  # (row attribute, field pattern with n=)

    def apply(self, filler: FormFiller, data: Mapping[str, Any]) -> None:
        rows = lookup(data, self.key)
        if not isinstance(rows, (list, tuple)):
            return
        if len(rows) > self.limit:
            logger.info(
                "%s: %s has %d rows, only the first %d fit the template",
                filler.label, self.key, len(rows), self.limit,
            )
        for n, row in enumerate(rows[: self.limit], start=1):
            if not isinstance(row, Mapping):
                continue
            for attribute, pattern in self.columns:
                filler.text(pattern.format(n=n), to_text(row.get(attribute)))


Rule = (
    Text | OtherText | JoinedText | Today | YesNo | YesElseNo | Rating | EqualsMark
    | SizeMarks | SuffixMark | BrandMarks | Radio | CheckboxChoice | IndexedCheckboxes
    | ProbeCheckboxes | Rows
)


def apply_rules(
    form: Form,
    data: Mapping[str, Any],
    rules: Sequence[Rule],
    label: str = "",
) -> FormFiller:
    """
    Apply every rule of a template to *form*.

    Args:
        form: The loaded template's form
        data: Submitted data
        rules: The template's field table
        label: Template name used in log messages

    Returns:
        The filler, with ``written`` and ``skipped`` field names
    """
    filler = FormFiller(form, label)
    for rule in rules:
        rule.apply(filler, data)
    logger.info(
        "%s: wrote %d fields, skipped %d", label, len(filler.written), len(filler.skipped)
    )
    return filler
