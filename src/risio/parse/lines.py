"""Tag line tokenizer.

Every RIS line has the fixed shape ``TT  - value``: a two character tag
(uppercase letter, then uppercase letter or digit), two spaces, a dash, a
space, and the value, which may be empty.
"""

import re

from risio.errors import ParseError, ParseErrorKind

__all__ = ["TAG_PATTERN", "extract_tag_value", "split_lines"]

TAG_PATTERN = re.compile(r"([A-Z][A-Z0-9])  - (.*)", re.DOTALL)


def extract_tag_value(line: str, line_no: int) -> tuple[str, str]:
    """Split one RIS line into tag and value.

    Parameters
    ----------
    line : str
        Line without its line terminator.
    line_no : int
        1-based line number, used for error reporting.

    Returns
    -------
    tuple[str, str]
        ``(tag, value)``; the value is returned verbatim.

    Raises
    ------
    ParseError
        With kind ``INVALID_LINE`` if the line does not match the grammar.
    """
    match = TAG_PATTERN.fullmatch(line)
    if match is None:
        raise ParseError(ParseErrorKind.INVALID_LINE, line_no)
    tag, value = match.groups()
    return tag, value


def split_lines(text: str) -> list[str]:
    """Split RIS text into lines.

    Lines are separated by ``\\n``; a trailing ``\\r`` is dropped from each
    line so CRLF input reads the same as LF input. A trailing newline does
    not produce an extra empty line.

    Parameters
    ----------
    text : str
        Complete document text.

    Returns
    -------
    list[str]
        Lines without terminators.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
