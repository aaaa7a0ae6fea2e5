"""Exceptions raised while reading RIS text."""

from enum import StrEnum

__all__ = ["ParseErrorKind", "ParseError", "DateFormatError", "EntryCountError"]


class ParseErrorKind(StrEnum):
    """Kinds of RIS parse failure.

    Attributes
    ----------
    INVALID_LINE : str
        Line does not follow ``TT  - value``, or ``ER`` carries a value.
    INVALID_KEY : str
        Tag inside an entry is not a known RIS tag.
    DUPLICATE_FIELD : str
        A single-valued field appeared twice in one entry.
    UNTERMINATED_ENTRY : str
        ``TY`` inside an open entry, a field outside any entry, or end of
        input before ``ER``.
    INVALID_DATE : str
        Date field is not ``YYYY/MM/DD/other``.
    """

    INVALID_LINE = "invalid_line"
    INVALID_KEY = "invalid_key"
    DUPLICATE_FIELD = "duplicate_field"
    UNTERMINATED_ENTRY = "unterminated_entry"
    INVALID_DATE = "invalid_date"


_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.INVALID_LINE: "Invalid line format",
    ParseErrorKind.INVALID_KEY: "Invalid key",
    ParseErrorKind.DUPLICATE_FIELD: "Duplicate field",
    ParseErrorKind.UNTERMINATED_ENTRY: "Unterminated entry",
    ParseErrorKind.INVALID_DATE: "Invalid date format",
}


class ParseError(Exception):
    """Raised when RIS text is malformed.

    Attributes
    ----------
    kind : ParseErrorKind
        What went wrong.
    line_no : int
        1-based line number where the problem was detected.
    file : str | None
        File being parsed, when known.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        line_no: int,
        file: str | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        kind : ParseErrorKind
            Error kind.
        line_no : int
            1-based line number.
        file : str | None, optional
            File where error occurred.
        """
        super().__init__(f"{_MESSAGES[kind]} at line {line_no}")
        self.kind = kind
        self.line_no = line_no
        self.file = file

    def with_file(self, file: str) -> "ParseError":
        """Return a copy of this error tagged with a file name."""
        return ParseError(self.kind, self.line_no, file=file)


class DateFormatError(ValueError):
    """Raised when a value is not a valid ``YYYY/MM/DD/other`` date."""


class EntryCountError(ValueError):
    """Raised when single-entry parsing receives zero or several entries."""
