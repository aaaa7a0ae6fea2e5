"""End-to-end tests: RIS files through parse, format and convert."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from risio import (
    Document,
    Entry,
    FileConfig,
    PublicationDate,
    ReferenceType,
    parse_document,
    read_ris_file,
    serialize_document,
    write_ris_file,
)
from risio.cli.main import cli


@pytest.mark.integration
def test_mixed_types_fixture(fixtures_dir: Path) -> None:
    """Book and chapter records resolve BT, synonyms and dates."""
    document = read_ris_file(fixtures_dir / "mixed_types.ris")

    book, chapter = document
    assert book == Entry(
        reference_type=ReferenceType.WHOLE_BOOK,
        id="knuth1968",
        title="The Art of Computer Programming",
        authors=("Knuth, Donald E.",),
        primary_date=PublicationDate(1968),
        keywords=("algorithms", "analysis"),
        publisher="Addison-Wesley",
        city="Reading, MA",
        serial_number="0-201-03801-3",
    )
    assert chapter == Entry(
        reference_type=ReferenceType.BOOK_CHAPTER,
        title="Sorting and Searching",
        secondary_title="The Art of Computer Programming",
        authors=("Knuth, Donald E.",),
        secondary_authors=("Editor, Some",),
        primary_date=PublicationDate(1973, 1, 15, "Second printing"),
        secondary_date=PublicationDate(1998, 3),
        doi="10.5555/1234",
    )


@pytest.mark.integration
def test_canonical_form_is_a_fixed_point(fixtures_dir: Path) -> None:
    """Serializing is idempotent once the text is canonical."""
    for name in ("shannon_turing.ris", "mixed_types.ris"):
        document = read_ris_file(fixtures_dir / name)
        canonical = serialize_document(document)

        reparsed = parse_document(canonical)

        assert reparsed == document
        assert serialize_document(reparsed) == canonical


@pytest.mark.integration
def test_file_round_trip_crlf_latin1(tmp_path: Path, fixtures_dir: Path) -> None:
    """Documents survive a write and read with non-default file options."""
    document = read_ris_file(fixtures_dir / "mixed_types.ris")
    output = tmp_path / "mixed_crlf.ris"
    config = FileConfig(output_encoding="latin-1", line_ending="\r\n")

    write_ris_file(document, output, config)

    assert b"\r\n" in output.read_bytes()
    assert read_ris_file(output, FileConfig(encoding="latin-1")) == document


@pytest.mark.integration
def test_cli_pipeline(tmp_path: Path, fixtures_dir: Path) -> None:
    """check, format and convert agree on the same input."""
    runner = CliRunner()
    source = fixtures_dir / "shannon_turing.ris"
    formatted = tmp_path / "formatted.ris"
    jsonl = tmp_path / "entries.jsonl"
    log_path = tmp_path / "events.jsonl"

    check = runner.invoke(cli, ["check", str(source), "--log", str(log_path)])
    fmt = runner.invoke(cli, ["format", str(source), "-o", str(formatted), "--log", str(log_path)])
    convert = runner.invoke(cli, ["convert", str(formatted), "-o", str(jsonl), "--log", str(log_path)])

    assert check.exit_code == 0
    assert fmt.exit_code == 0
    assert convert.exit_code == 0

    assert read_ris_file(formatted) == read_ris_file(source)

    rows = [json.loads(line) for line in jsonl.read_text(encoding="utf-8").splitlines()]
    assert Document([Entry.from_dict(row) for row in rows]) == read_ris_file(source)

    with log_path.open() as f:
        events = [json.loads(line) for line in f]
    run_ids = {e["run_id"] for e in events}
    assert len(run_ids) == 3
    assert [e["stage"] for e in events if e["event"] == "run_started"] == [
        "check",
        "format",
        "convert",
    ]
    assert all(
        e["data"]["status"] == "success" for e in events if e["event"] == "run_finished"
    )
