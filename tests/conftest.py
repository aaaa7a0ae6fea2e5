"""Pytest configuration and fixtures for test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from risio.models import Entry, PublicationDate, ReferenceType  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SHANNON_RIS = (
    "TY  - JOUR\n"
    "AU  - Shannon, Claude E.\n"
    "PY  - 1948/07//\n"
    "TI  - A Mathematical Theory of Communication\n"
    "T2  - Bell System Technical Journal\n"
    "SP  - 379\n"
    "EP  - 423\n"
    "VL  - 27\n"
    "ER  - "
)

SHANNON_CANONICAL = (
    "TY  - JOUR\n"
    "T1  - A Mathematical Theory of Communication\n"
    "T2  - Bell System Technical Journal\n"
    "A1  - Shannon, Claude E.\n"
    "Y1  - 1948/07//\n"
    "SP  - 379\n"
    "EP  - 423\n"
    "VL  - 27\n"
    "ER  - "
)

TURING_CANONICAL = (
    "TY  - JOUR\n"
    "T1  - On computable numbers, with an application to the Entscheidungsproblem\n"
    "A1  - Turing, Alan Mathison\n"
    "Y1  - 1937///\n"
    "SP  - 230\n"
    "EP  - 265\n"
    "JF  - Proc. of London Mathematical Society\n"
    "VL  - 47\n"
    "IS  - 1\n"
    "ER  - "
)


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to RIS fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def shannon_entry() -> Entry:
    """Entry for Shannon (1948), as read from SHANNON_RIS."""
    return Entry(
        reference_type=ReferenceType.JOURNAL,
        authors=("Shannon, Claude E.",),
        primary_date=PublicationDate(1948, 7, None, None),
        title="A Mathematical Theory of Communication",
        secondary_title="Bell System Technical Journal",
        start_page="379",
        end_page="423",
        volume="27",
    )


@pytest.fixture
def turing_entry() -> Entry:
    """Entry for Turing (1937), journal given with ``JO``."""
    return Entry(
        reference_type=ReferenceType.JOURNAL,
        title="On computable numbers, with an application to the Entscheidungsproblem",
        authors=("Turing, Alan Mathison",),
        journal="Proc. of London Mathematical Society",
        volume="47",
        issue="1",
        start_page="230",
        end_page="265",
        primary_date=PublicationDate(1937),
    )


@pytest.fixture
def shannon_ris() -> str:
    """Shannon record as exported by a reference manager."""
    return SHANNON_RIS


@pytest.fixture
def shannon_canonical() -> str:
    """Canonical serialization of the Shannon entry."""
    return SHANNON_CANONICAL


@pytest.fixture
def turing_canonical() -> str:
    """Canonical serialization of the Turing entry."""
    return TURING_CANONICAL
