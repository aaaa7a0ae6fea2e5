"""Strict reader and writer for RIS bibliographic files.

This package provides:
- Data models (risio.models): entries, dates and reference types
- Parsing (risio.parse): RIS text to entries
- Tag mappings (risio.tag_mappings): tag to field table
- Writing (risio.write): entries back to canonical RIS text
- Configuration (risio.config): file encoding and line-ending options
- Audit (risio.audit): structured JSONL event logging
- CLI (risio.cli): command-line interface
- Public API (risio.api): file-level convenience functions
"""

__version__ = "0.4.0"
__license__ = "MIT"

from risio.api import read_ris_file, write_jsonl, write_ris_file
from risio.config import FileConfig
from risio.errors import DateFormatError, EntryCountError, ParseError, ParseErrorKind
from risio.models import (
    Document,
    Entry,
    OtherReferenceType,
    PublicationDate,
    ReferenceType,
    format_reference_type,
    parse_reference_type,
)
from risio.parse import format_date, parse_date, parse_document, parse_entry
from risio.write import serialize_document, serialize_entry

__all__ = [
    "__version__",
    "__license__",
    # Models
    "Document",
    "Entry",
    "PublicationDate",
    "ReferenceType",
    "OtherReferenceType",
    # Codec
    "parse_document",
    "parse_entry",
    "serialize_document",
    "serialize_entry",
    "parse_date",
    "format_date",
    "parse_reference_type",
    "format_reference_type",
    # Files
    "FileConfig",
    "read_ris_file",
    "write_ris_file",
    "write_jsonl",
    # Errors
    "ParseError",
    "ParseErrorKind",
    "DateFormatError",
    "EntryCountError",
]
