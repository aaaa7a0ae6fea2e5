"""RIS format writer for entries and documents."""

from collections.abc import Iterable
from pathlib import Path

from risio.config import FileConfig
from risio.models import Entry, PublicationDate, format_reference_type
from risio.parse.dates import format_date
from risio.tag_mappings import CLOSE_TAG, FIELD_SPECS, OPEN_TAG, Cardinality

__all__ = [
    "format_line",
    "serialize_entry",
    "serialize_document",
    "write_ris_file",
]


def format_line(tag: str, value: str) -> str:
    """Format one ``TT  - value`` line.

    Raises
    ------
    ValueError
        If the value contains a line break.
    """
    if "\n" in value or "\r" in value:
        raise ValueError(f"Line break in {tag} value: {value!r}")
    return f"{tag}  - {value}"


def _format_value(value: str | PublicationDate) -> str:
    if isinstance(value, PublicationDate):
        return format_date(value)
    return value


def serialize_entry(entry: Entry) -> str:
    """Format an entry as a single RIS record.

    Fields are written in table order using their canonical tag, so
    synonyms read from the input (``AU``, ``PY``, ``JO``...) come back as
    ``A1``, ``Y1``, ``JF``.

    Parameters
    ----------
    entry : Entry
        Entry to format.

    Returns
    -------
    str
        RIS record from ``TY`` to ``ER  - ``, without a trailing newline.

    Raises
    ------
    ValueError
        If a value contains a line break or a date does not fit the
        ``YYYY/MM/DD/other`` layout.
    """
    lines = [format_line(OPEN_TAG, format_reference_type(entry.reference_type))]

    for spec in FIELD_SPECS:
        value = getattr(entry, spec.slot)
        if spec.cardinality is Cardinality.REPEATED:
            lines.extend(format_line(spec.output_tag, item) for item in value)
        elif value is not None:
            lines.append(format_line(spec.output_tag, _format_value(value)))

    lines.append(format_line(CLOSE_TAG, ""))
    return "\n".join(lines)


def serialize_document(entries: Iterable[Entry]) -> str:
    """Format entries as a RIS document.

    Consecutive records are separated by one blank line. An empty document
    gives an empty string; there is no trailing newline.

    Parameters
    ----------
    entries : Iterable[Entry]
        Entries in output order (typically a ``Document``).

    Returns
    -------
    str
        RIS document text.
    """
    return "\n\n".join(serialize_entry(entry) for entry in entries)


def write_ris_file(
    entries: Iterable[Entry],
    output_path: Path,
    config: FileConfig | None = None,
) -> int:
    """Write entries to a RIS file.

    Parameters
    ----------
    entries : Iterable[Entry]
        Entries to write.
    output_path : Path
        Output file path.
    config : FileConfig | None, optional
        Encoding and line-ending options, by default ``FileConfig()``.

    Returns
    -------
    int
        Number of bytes written.
    """
    if config is None:
        config = FileConfig()

    text = serialize_document(entries)
    if text and config.trailing_newline:
        text += "\n"
    if config.line_ending != "\n":
        text = text.replace("\n", config.line_ending)

    data = text.encode(config.output_encoding)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return len(data)
