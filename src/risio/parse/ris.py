"""RIS document parser.

RIS specification: Two-letter tags, "TY  - " starts record, "ER  - " ends it.
Reference: https://refdb.sourceforge.net/manual-0.9.6/sect1-ris-format.html

Parsing is strict: the first malformed line aborts the whole document with
a ``ParseError`` carrying its line number. Blank lines are accepted only
between records.
"""

from dataclasses import dataclass, field
from typing import Any

from risio.errors import DateFormatError, EntryCountError, ParseError, ParseErrorKind
from risio.models import AnyReferenceType, Document, Entry, parse_reference_type
from risio.parse.dates import parse_date
from risio.parse.lines import extract_tag_value, split_lines
from risio.tag_mappings import (
    OPEN_TAG,
    Cardinality,
    FieldSpec,
    TagRole,
    ValueKind,
    resolve_tag,
)

__all__ = ["parse_document", "parse_entry"]


@dataclass
class _EntryBuilder:
    """Mutable accumulator for the entry between ``TY`` and ``ER``."""

    reference_type: AnyReferenceType
    start_line: int
    values: dict[str, Any] = field(default_factory=dict)

    def apply(self, spec: FieldSpec, value: str, line_no: int) -> None:
        if spec.cardinality is Cardinality.REPEATED:
            self.values.setdefault(spec.slot, []).append(value)
            return

        if spec.slot in self.values:
            raise ParseError(ParseErrorKind.DUPLICATE_FIELD, line_no)

        if spec.kind is ValueKind.DATE:
            try:
                self.values[spec.slot] = parse_date(value)
            except DateFormatError:
                raise ParseError(ParseErrorKind.INVALID_DATE, line_no) from None
        else:
            self.values[spec.slot] = value

    def build(self) -> Entry:
        return Entry(reference_type=self.reference_type, **self.values)


def _parse_entries(text: str) -> list[Entry]:
    """Run the record boundary state machine over ``text``.

    Parameters
    ----------
    text : str
        Complete RIS text.

    Returns
    -------
    list[Entry]
        Entries in file order.

    Raises
    ------
    ParseError
        On the first malformed line.
    """
    entries: list[Entry] = []
    # START while builder is None, IN_PROGRESS otherwise
    builder: _EntryBuilder | None = None

    for line_no, line in enumerate(split_lines(text), start=1):
        if builder is None and line == "":
            continue

        tag, value = extract_tag_value(line, line_no)

        if builder is None:
            if tag != OPEN_TAG:
                raise ParseError(ParseErrorKind.UNTERMINATED_ENTRY, line_no)
            builder = _EntryBuilder(parse_reference_type(value), start_line=line_no)
            continue

        resolution = resolve_tag(tag, builder.reference_type)

        if resolution.spec is not None:
            builder.apply(resolution.spec, value, line_no)
        elif resolution.role is TagRole.CLOSE:
            if value:
                raise ParseError(ParseErrorKind.INVALID_LINE, line_no)
            entries.append(builder.build())
            builder = None
        elif resolution.role is TagRole.OPEN:
            raise ParseError(ParseErrorKind.UNTERMINATED_ENTRY, line_no)
        else:
            raise ParseError(ParseErrorKind.INVALID_KEY, line_no)

    if builder is not None:
        raise ParseError(ParseErrorKind.UNTERMINATED_ENTRY, builder.start_line)

    return entries


def parse_document(text: str) -> Document:
    """Parse RIS text containing any number of records.

    Parameters
    ----------
    text : str
        RIS document text.

    Returns
    -------
    Document
        Entries in file order; empty for empty input.

    Raises
    ------
    ParseError
        If any line is malformed. No partial document is returned.

    Examples
    --------
        >>> doc = parse_document("TY  - JOUR\\nTI  - Title\\nER  - ")
        >>> doc[0].title
        'Title'
    """
    return Document(_parse_entries(text))


def parse_entry(text: str) -> Entry:
    """Parse RIS text containing exactly one record.

    Parameters
    ----------
    text : str
        RIS text of a single record.

    Returns
    -------
    Entry
        The parsed entry.

    Raises
    ------
    ParseError
        If any line is malformed.
    EntryCountError
        If the text holds no record or more than one.
    """
    entries = _parse_entries(text)
    if len(entries) != 1:
        raise EntryCountError(f"Expected exactly one entry, found {len(entries)}")
    return entries[0]
