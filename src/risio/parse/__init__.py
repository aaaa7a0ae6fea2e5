"""RIS text parsing.

Main entry points:
- parse_document: Parse a document with any number of records
- parse_entry: Parse text holding exactly one record
- parse_date: Parse a ``YYYY/MM/DD/other`` date value
"""

from risio.parse.dates import format_date, parse_date
from risio.parse.lines import extract_tag_value, split_lines
from risio.parse.ris import parse_document, parse_entry

__all__ = [
    "parse_document",
    "parse_entry",
    "parse_date",
    "format_date",
    "extract_tag_value",
    "split_lines",
]
