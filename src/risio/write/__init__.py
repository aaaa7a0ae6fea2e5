"""Serialization of entries back to RIS text."""

from risio.write.ris_writer import (
    format_line,
    serialize_document,
    serialize_entry,
    write_ris_file,
)

__all__ = [
    "format_line",
    "serialize_entry",
    "serialize_document",
    "write_ris_file",
]
