"""Byte-level helpers for reading RIS files."""

__all__ = ["detect_encoding", "normalize_line_endings", "decode_ris_bytes"]


def detect_encoding(file_bytes: bytes) -> str:
    """Detect encoding of file bytes using deterministic strategy.

    Parameters
    ----------
    file_bytes : bytes
        Complete file content as bytes.

    Returns
    -------
    str
        Detected encoding (utf-8-sig, utf-8 or latin-1).
    """
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def normalize_line_endings(content: str) -> str:
    """Normalize line endings to LF.

    Parameters
    ----------
    content : str
        Text content with potentially mixed line endings.

    Returns
    -------
    str
        Text with normalized line endings (\\n only).
    """
    content = content.replace("\r\n", "\n")
    return content.replace("\r", "\n")


def decode_ris_bytes(file_bytes: bytes, encoding: str | None = None) -> tuple[str, str]:
    """Decode RIS file bytes to text with LF line endings.

    Parameters
    ----------
    file_bytes : bytes
        Raw file content.
    encoding : str | None, optional
        Encoding to use; detected when None.

    Returns
    -------
    tuple[str, str]
        ``(text, encoding_used)``.

    Raises
    ------
    UnicodeDecodeError
        If an explicit encoding cannot decode the bytes.
    """
    encoding_used = encoding or detect_encoding(file_bytes)
    text = file_bytes.decode(encoding_used)
    return normalize_line_endings(text), encoding_used
