"""Centralized RIS tag to field mapping.

This module defines which tags write which ``Entry`` field, in what order
fields are serialized, and which tag is written back for each field.
Adding a field requires only adding a new entry to FIELD_SPECS (and the
matching attribute on ``Entry``).
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from risio.models import AnyReferenceType, ReferenceType

__all__ = [
    "Cardinality",
    "ValueKind",
    "FieldSpec",
    "FIELD_SPECS",
    "TAG_TO_FIELD",
    "OPEN_TAG",
    "CLOSE_TAG",
    "TagRole",
    "TagResolution",
    "resolve_tag",
]

OPEN_TAG = "TY"
CLOSE_TAG = "ER"


class Cardinality(StrEnum):
    """How often a field may appear in one entry."""

    UNIQUE = "unique"
    REPEATED = "repeated"


class ValueKind(StrEnum):
    """How a field value is decoded."""

    TEXT = "text"
    DATE = "date"


@dataclass(frozen=True)
class FieldSpec:
    """Mapping between an ``Entry`` field and its RIS tags.

    Attributes
    ----------
    slot : str
        ``Entry`` attribute name.
    output_tag : str
        Tag written by the serializer.
    input_tags : tuple[str, ...]
        Tags accepted by the parser (``output_tag`` first, then synonyms).
    cardinality : Cardinality
        UNIQUE fields reject a second value; REPEATED fields append.
    kind : ValueKind
        TEXT values are stored verbatim; DATE values go through the date codec.
    """

    slot: str
    output_tag: str
    input_tags: tuple[str, ...]
    cardinality: Cardinality = Cardinality.UNIQUE
    kind: ValueKind = ValueKind.TEXT


def _text(slot: str, tag: str, *synonyms: str) -> FieldSpec:
    return FieldSpec(slot, tag, (tag, *synonyms))


def _list(slot: str, tag: str, *synonyms: str) -> FieldSpec:
    return FieldSpec(slot, tag, (tag, *synonyms), cardinality=Cardinality.REPEATED)


def _date(slot: str, tag: str, *synonyms: str) -> FieldSpec:
    return FieldSpec(slot, tag, (tag, *synonyms), kind=ValueKind.DATE)


# Declaration order is serialization order
FIELD_SPECS: tuple[FieldSpec, ...] = (
    _text("id", "ID"),
    _text("title", "T1", "TI"),
    _text("secondary_title", "T2"),
    _text("tertiary_title", "T3"),
    _list("authors", "A1", "AU"),
    _list("secondary_authors", "A2", "ED"),
    _list("tertiary_authors", "A3"),
    _date("primary_date", "Y1", "PY", "DA"),
    _date("secondary_date", "Y2"),
    _text("notes", "N1"),
    _text("abstract", "AB", "N2"),
    _list("keywords", "KW"),
    _text("reprint", "RP"),
    _text("availability", "AV"),
    _text("caption", "CA"),
    _text("call_number", "CN"),
    _text("doi", "DO"),
    _text("start_page", "SP"),
    _text("end_page", "EP"),
    _text("journal", "JF", "JO"),
    _text("journal_abbrev", "JA"),
    _text("journal_abbrev_1", "J1"),
    _text("journal_abbrev_2", "J2"),
    _text("volume", "VL"),
    _text("issue", "IS"),
    _text("city", "CY"),
    _text("publisher", "PB"),
    _text("serial_number", "SN"),
    _text("address", "AD"),
    *(_text(f"user_{n}", f"U{n}") for n in range(1, 6)),
    *(_text(f"custom_{n}", f"C{n}") for n in range(1, 9)),
    *(_text(f"misc_{n}", f"M{n}") for n in range(1, 4)),
)

TAG_TO_FIELD: dict[str, FieldSpec] = {
    tag: spec for spec in FIELD_SPECS for tag in spec.input_tags
}

_SLOT_TO_FIELD: dict[str, FieldSpec] = {spec.slot: spec for spec in FIELD_SPECS}

# BT is the book title: the entry's own title for whole books and
# unpublished works, the containing work's title for everything else
_BT_AS_TITLE: frozenset[ReferenceType] = frozenset(
    {ReferenceType.WHOLE_BOOK, ReferenceType.UNPUBLISHED_WORK}
)


class TagRole(StrEnum):
    """What a tag does inside an open entry."""

    OPEN = "open"
    CLOSE = "close"
    FIELD = "field"
    UNKNOWN = "unknown"


class TagResolution(NamedTuple):
    """Outcome of looking up a tag.

    Attributes
    ----------
    role : TagRole
        Role of the tag.
    spec : FieldSpec | None
        Target field when ``role`` is FIELD, else None.
    """

    role: TagRole
    spec: FieldSpec | None = None


def resolve_tag(tag: str, reference_type: AnyReferenceType) -> TagResolution:
    """Resolve a tag for an entry of the given reference type.

    Parameters
    ----------
    tag : str
        Two-character RIS tag.
    reference_type : AnyReferenceType
        Reference type of the entry being built.

    Returns
    -------
    TagResolution
        Role and, for field tags, the target field.
    """
    if tag == OPEN_TAG:
        return TagResolution(TagRole.OPEN)
    if tag == CLOSE_TAG:
        return TagResolution(TagRole.CLOSE)
    if tag == "BT":
        slot = "title" if reference_type in _BT_AS_TITLE else "secondary_title"
        return TagResolution(TagRole.FIELD, _SLOT_TO_FIELD[slot])

    spec = TAG_TO_FIELD.get(tag)
    if spec is None:
        return TagResolution(TagRole.UNKNOWN)
    return TagResolution(TagRole.FIELD, spec)

