"""Command-line interface for risio.

Provides CLI commands to validate, reformat and convert RIS files.
"""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, NoReturn

import click

from risio import __version__
from risio.api import RisFile, load_ris_file, write_jsonl, write_ris_file
from risio.audit import AuditLogger
from risio.config import LINE_ENDINGS, FileConfig
from risio.errors import ParseError
from risio.write import serialize_document

__all__ = ["cli"]

_REPORTED_ERRORS = (ParseError, OSError, ValueError)


@contextmanager
def _audit_run(
    log_path: str | None,
    stage: str,
    parameters: dict[str, Any],
) -> Iterator[AuditLogger | None]:
    """Open an audit logger for one command run, if ``--log`` was given."""
    if log_path is None:
        yield None
        return

    with AuditLogger(Path(log_path), stage=stage) as audit, audit.run(sys.argv, parameters):
        yield audit


def _load(path: str, config: FileConfig, audit: AuditLogger | None) -> RisFile:
    ris_file = load_ris_file(path, config)
    if audit is not None:
        audit.file_parsed(
            str(ris_file.path),
            ris_file.sha256,
            len(ris_file.document),
            encoding=ris_file.encoding,
        )
    return ris_file


def _fail(error: Exception, audit: AuditLogger | None, file: str | None = None) -> NoReturn:
    """Report an error and exit with status 1."""
    if isinstance(error, ParseError) and error.file is not None:
        file = error.file
    if audit is not None:
        audit.error(error, file=file)

    location = f"{file}: " if file else ""
    click.secho(f"✗ {location}{error}", fg="red", err=True)
    sys.exit(1)


def _written(audit: AuditLogger | None, path: str, entries: int) -> None:
    if audit is not None:
        audit.file_written(Path(path), entries)


log_option = click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append structured JSONL audit events to this file",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
encoding_option = click.option(
    "--encoding",
    type=str,
    default=None,
    help="Input encoding (default: auto-detect UTF-8/Latin-1)",
)


@click.group()
@click.version_option(version=__version__, prog_name="risio")
def cli() -> None:
    """Strict reader and writer for RIS bibliographic files.

    Use 'risio COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@encoding_option
@log_option
@verbose_option
def check(
    files: tuple[str, ...],
    encoding: str | None,
    log_path: str | None,
    verbose: bool,
) -> None:
    """Validate one or more RIS files.

    Stops at the first error and reports its file and line number.

    Examples
    --------
        risio check references.ris
        risio check a.ris b.ris --log events.jsonl
    """
    with _audit_run(log_path, "check", {"files": list(files), "encoding": encoding}) as audit:
        total = 0
        for path in files:
            try:
                ris_file = _load(path, FileConfig(encoding=encoding), audit)
            except _REPORTED_ERRORS as e:
                _fail(e, audit, file=path)

            total += len(ris_file.document)
            if verbose:
                click.echo(f"{path}: {len(ris_file.document)} entries", err=True)

        click.secho(f"✓ {len(files)} file(s) valid, {total} entries", fg="green")


@cli.command(name="format")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output RIS file path (default: standard output)",
)
@click.option(
    "--line-ending",
    type=click.Choice(sorted(LINE_ENDINGS)),
    default="lf",
    help="Line ending for the output file (default: lf)",
)
@encoding_option
@log_option
@verbose_option
def format_command(
    input_path: str,
    output: str | None,
    line_ending: str,
    encoding: str | None,
    log_path: str | None,
    verbose: bool,
) -> None:
    """Rewrite INPUT_PATH in canonical RIS form.

    Synonym tags are written with their canonical tag, fields are emitted
    in a fixed order and dates are written as YYYY/MM/DD/other.

    Examples
    --------
        risio format references.ris -o clean.ris
        risio format references.ris --line-ending crlf -o clean.ris
    """
    parameters = {"input": input_path, "output": output, "line_ending": line_ending}
    with _audit_run(log_path, "format", parameters) as audit:
        try:
            config = FileConfig.from_options(encoding=encoding, line_ending=line_ending)
            ris_file = _load(input_path, config, audit)

            if output is None:
                text = serialize_document(ris_file.document) + "\n"
                click.echo(text.replace("\n", config.line_ending), nl=False)
                return

            if verbose:
                click.echo(f"Writing {len(ris_file.document)} entries to: {output}", err=True)

            write_ris_file(ris_file.document, output, config)
            _written(audit, output, len(ris_file.document))
        except _REPORTED_ERRORS as e:
            _fail(e, audit, file=input_path)

        click.secho(
            f"✓ Successfully wrote {len(ris_file.document)} entries to {output}",
            fg="green",
        )


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Output JSONL file path",
)
@encoding_option
@log_option
@verbose_option
def convert(
    input_path: str,
    output: str,
    encoding: str | None,
    log_path: str | None,
    verbose: bool,
) -> None:
    """Convert INPUT_PATH to JSONL, one entry per line.

    Examples
    --------
        risio convert references.ris -o entries.jsonl
    """
    parameters = {"input": input_path, "output": output}
    with _audit_run(log_path, "convert", parameters) as audit:
        try:
            ris_file = _load(input_path, FileConfig(encoding=encoding), audit)

            if verbose:
                click.echo(f"Found {len(ris_file.document)} entries", err=True)
                click.echo(f"Writing to: {output}", err=True)

            count = write_jsonl(ris_file.document, output)
            _written(audit, output, count)
        except _REPORTED_ERRORS as e:
            _fail(e, audit, file=input_path)

        click.secho(f"✓ Successfully wrote {count} entries to {output}", fg="green")


if __name__ == "__main__":
    cli()
