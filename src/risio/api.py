"""Public API for reading and writing RIS files.

This module provides the file-level public API for risio, enabling:
- Reading RIS files into Document objects
- Writing documents back as canonical RIS
- Exporting entries to JSONL format
"""

import json
from dataclasses import dataclass
from pathlib import Path

from risio.audit.events import sha256_digest
from risio.config import FileConfig
from risio.errors import ParseError
from risio.models import Document
from risio.parse import parse_document
from risio.parse.decoding import decode_ris_bytes
from risio.write import write_ris_file as _write_ris

__all__ = [
    "RisFile",
    "load_ris_file",
    "read_ris_file",
    "write_ris_file",
    "write_jsonl",
]


@dataclass(frozen=True)
class RisFile:
    """Immutable result of loading a RIS file.

    Attributes
    ----------
    path : Path
        Path to the file.
    document : Document
        Parsed entries.
    encoding : str
        Encoding used to decode the file.
    sha256 : str
        SHA-256 digest of the file bytes.
    size : int
        Size of file in bytes.
    """

    path: Path
    document: Document
    encoding: str
    sha256: str
    size: int


def load_ris_file(
    path: str | Path,
    config: FileConfig | None = None,
) -> RisFile:
    """Read and parse a RIS file, keeping file metadata.

    Parameters
    ----------
    path : str | Path
        Path to the RIS file.
    config : FileConfig | None, optional
        Decoding options, by default encoding is auto-detected.

    Returns
    -------
    RisFile
        Parsed document with encoding and digest of the source bytes.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    ParseError
        If the content is not valid RIS; ``error.file`` is set to the path.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if config is None:
        config = FileConfig()

    file_bytes = file_path.read_bytes()
    text, encoding = decode_ris_bytes(file_bytes, config.encoding)

    try:
        document = parse_document(text)
    except ParseError as e:
        raise e.with_file(str(file_path)) from None

    return RisFile(
        path=file_path,
        document=document,
        encoding=encoding,
        sha256=sha256_digest(file_bytes),
        size=len(file_bytes),
    )


def read_ris_file(
    path: str | Path,
    config: FileConfig | None = None,
) -> Document:
    """Read and parse a RIS file.

    Parameters
    ----------
    path : str | Path
        Path to the RIS file.
    config : FileConfig | None, optional
        Decoding options, by default encoding is auto-detected.

    Returns
    -------
    Document
        Parsed entries in file order.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    ParseError
        If the content is not valid RIS; ``error.file`` is set to the path.
    UnicodeDecodeError
        If an explicit encoding cannot decode the file.

    Examples
    --------
    Read a RIS file:

        >>> from risio import read_ris_file
        >>> doc = read_ris_file("references.ris")
        >>> for entry in doc:
        ...     print(entry.title)
    """
    return load_ris_file(path, config).document


def write_ris_file(
    document: Document,
    path: str | Path,
    config: FileConfig | None = None,
) -> int:
    """Write a document as canonical RIS.

    Parameters
    ----------
    document : Document
        Entries to write.
    path : str | Path
        Output file path; parent directories are created.
    config : FileConfig | None, optional
        Encoding and line-ending options.

    Returns
    -------
    int
        Number of bytes written.

    Examples
    --------
    Normalize a RIS file:

        >>> from risio import read_ris_file, write_ris_file
        >>> write_ris_file(read_ris_file("in.ris"), "out.ris")
    """
    return _write_ris(document, Path(path), config)


def write_jsonl(
    document: Document,
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> int:
    """Write entries to JSONL file (one JSON object per line).

    Output is deterministic with consistent field ordering and UTF-8 encoding.

    Parameters
    ----------
    document : Document
        Entries to write.
    path : str | Path
        Output file path.
    sort_keys : bool, optional
        Whether to sort dictionary keys for deterministic output,
        by default True.

    Returns
    -------
    int
        Number of entries written.

    Examples
    --------
    Export parsed entries to JSONL:

        >>> from risio import read_ris_file, write_jsonl
        >>> write_jsonl(read_ris_file("references.ris"), "output.jsonl")
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for entry in document:
            json_str = json.dumps(
                entry.to_dict(),
                ensure_ascii=False,
                sort_keys=sort_keys,
            )
            f.write(json_str + "\n")
            count += 1

    return count
