"""Shared data types for risio.

This package contains the entry, document, date and reference type models
produced by the parser and consumed by the writer.
"""

from risio.models.entry import (
    DATE_FIELDS,
    REPEATED_FIELDS,
    Document,
    Entry,
    PublicationDate,
)
from risio.models.reference_types import (
    AnyReferenceType,
    OtherReferenceType,
    ReferenceType,
    format_reference_type,
    parse_reference_type,
)

__all__ = [
    # Record models
    "Document",
    "Entry",
    "PublicationDate",
    "REPEATED_FIELDS",
    "DATE_FIELDS",
    # Reference types
    "ReferenceType",
    "OtherReferenceType",
    "AnyReferenceType",
    "parse_reference_type",
    "format_reference_type",
]
