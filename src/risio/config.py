"""File-level reading and writing options."""

import codecs
from dataclasses import asdict, dataclass
from typing import Any

__all__ = ["FileConfig", "LINE_ENDINGS"]

LINE_ENDINGS: dict[str, str] = {"lf": "\n", "crlf": "\r\n"}


@dataclass
class FileConfig:
    """Options for reading and writing RIS files.

    The codec itself works on ``str``; these options only affect how files
    are decoded and encoded.

    Attributes
    ----------
    encoding : str | None
        Input encoding. If None, detected from the bytes (UTF-8 with or
        without BOM, else Latin-1).
    output_encoding : str
        Encoding used when writing (default: utf-8).
    line_ending : str
        Line terminator used when writing: "\\n" or "\\r\\n" (default: "\\n").
    trailing_newline : bool
        Terminate the written file with a line ending (default: True).
    """

    encoding: str | None = None
    output_encoding: str = "utf-8"
    line_ending: str = "\n"
    trailing_newline: bool = True

    def __post_init__(self) -> None:
        """Validate options."""
        if self.line_ending not in LINE_ENDINGS.values():
            raise ValueError(f"line_ending must be '\\n' or '\\r\\n', got {self.line_ending!r}")

        for name in ("encoding", "output_encoding"):
            value = getattr(self, name)
            if value is None:
                continue
            try:
                codecs.lookup(value)
            except LookupError:
                raise ValueError(f"Unknown {name}: {value!r}") from None

    @classmethod
    def from_options(
        cls,
        encoding: str | None = None,
        line_ending: str = "lf",
        trailing_newline: bool = True,
    ) -> "FileConfig":
        """Build config from CLI-style option names.

        Parameters
        ----------
        encoding : str | None, optional
            Input encoding, None to auto-detect.
        line_ending : str, optional
            "lf" or "crlf", by default "lf".
        trailing_newline : bool, optional
            Whether to terminate the file with a newline, by default True.

        Returns
        -------
        FileConfig
            Validated configuration.
        """
        if line_ending not in LINE_ENDINGS:
            raise ValueError(
                f"line_ending must be one of {sorted(LINE_ENDINGS)}, got {line_ending!r}"
            )
        return cls(
            encoding=encoding,
            line_ending=LINE_ENDINGS[line_ending],
            trailing_newline=trailing_newline,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
