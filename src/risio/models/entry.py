"""Entry and document data models.

An :class:`Entry` is one RIS record, from its ``TY`` line to its ``ER``
line. Entries are frozen once built; the parser accumulates values in a
private builder and only constructs the ``Entry`` when the record is closed.
"""

from collections.abc import Iterator, Sequence
from dataclasses import asdict, dataclass, fields
from typing import Any, overload

from risio.models.reference_types import (
    AnyReferenceType,
    format_reference_type,
    parse_reference_type,
)

__all__ = ["PublicationDate", "Entry", "Document", "REPEATED_FIELDS", "DATE_FIELDS"]

REPEATED_FIELDS: frozenset[str] = frozenset(
    {"authors", "secondary_authors", "tertiary_authors", "keywords"}
)
DATE_FIELDS: frozenset[str] = frozenset({"primary_date", "secondary_date"})


@dataclass(frozen=True)
class PublicationDate:
    """Partial publication date.

    Only the year is mandatory. A missing component is ``None``, which is
    distinct from a zero month or day.

    Attributes
    ----------
    year : int
        Four-digit year.
    month : int | None
        Month, if known.
    day : int | None
        Day of month, if known.
    other_info : str | None
        Free text following the day component (e.g. a season).
    """

    year: int
    month: int | None = None
    day: int | None = None
    other_info: str | None = None


@dataclass(frozen=True)
class Entry:
    """A single RIS record.

    Attributes
    ----------
    reference_type : AnyReferenceType
        Value of the ``TY`` tag.
    authors, secondary_authors, tertiary_authors, keywords : tuple[str, ...]
        Repeatable tags, in the order they appeared.
    primary_date, secondary_date : PublicationDate | None
        Structured ``Y1``/``Y2`` dates.

    Every other attribute is an optional text field written by exactly one
    tag (or a synonym of it); see ``risio.tag_mappings.FIELD_SPECS``.
    """

    reference_type: AnyReferenceType

    id: str | None = None

    title: str | None = None
    secondary_title: str | None = None
    tertiary_title: str | None = None

    authors: tuple[str, ...] = ()
    secondary_authors: tuple[str, ...] = ()
    tertiary_authors: tuple[str, ...] = ()

    primary_date: PublicationDate | None = None
    secondary_date: PublicationDate | None = None

    notes: str | None = None
    abstract: str | None = None
    keywords: tuple[str, ...] = ()
    reprint: str | None = None
    availability: str | None = None
    caption: str | None = None
    call_number: str | None = None
    doi: str | None = None

    start_page: str | None = None
    end_page: str | None = None

    journal: str | None = None
    journal_abbrev: str | None = None
    journal_abbrev_1: str | None = None
    journal_abbrev_2: str | None = None

    volume: str | None = None
    issue: str | None = None
    city: str | None = None
    publisher: str | None = None
    serial_number: str | None = None
    address: str | None = None

    user_1: str | None = None
    user_2: str | None = None
    user_3: str | None = None
    user_4: str | None = None
    user_5: str | None = None

    custom_1: str | None = None
    custom_2: str | None = None
    custom_3: str | None = None
    custom_4: str | None = None
    custom_5: str | None = None
    custom_6: str | None = None
    custom_7: str | None = None
    custom_8: str | None = None

    misc_1: str | None = None
    misc_2: str | None = None
    misc_3: str | None = None

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples so the entry stays immutable
        for name in REPEATED_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def to_dict(self) -> dict[str, Any]:
        """Convert entry to a JSON-compatible dictionary.

        Returns
        -------
        dict[str, Any]
            Field name to value; the reference type is its RIS code,
            dates are nested dictionaries and repeated fields are lists.
        """
        data = asdict(self)
        data["reference_type"] = format_reference_type(self.reference_type)
        for name in REPEATED_FIELDS:
            data[name] = list(data[name])
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """Reconstruct an Entry from :meth:`to_dict` output.

        Parameters
        ----------
        data : dict[str, Any]
            Dictionary with at least ``reference_type``.

        Returns
        -------
        Entry
            Reconstructed entry.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for name, value in data.items():
            if name not in known:
                raise ValueError(f"Unknown entry field: {name!r}")
            if name in DATE_FIELDS and value is not None:
                value = PublicationDate(**value)
            values[name] = value

        values["reference_type"] = parse_reference_type(data["reference_type"])
        return cls(**values)


class Document(Sequence[Entry]):
    """Ordered, immutable list of entries parsed from one RIS text."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Sequence[Entry] = ()) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)

    @overload
    def __getitem__(self, index: int) -> Entry: ...

    @overload
    def __getitem__(self, index: slice) -> "Document": ...

    def __getitem__(self, index: int | slice) -> "Entry | Document":
        if isinstance(index, slice):
            return Document(self._entries[index])
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Document):
            return self._entries == other._entries
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Document({list(self._entries)!r})"

    def to_dicts(self) -> list[dict[str, Any]]:
        """Convert every entry with :meth:`Entry.to_dict`."""
        return [entry.to_dict() for entry in self._entries]
