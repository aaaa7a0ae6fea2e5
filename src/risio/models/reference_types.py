"""Reference type codes used by the RIS ``TY`` tag.

The set of standard codes is closed; any other code is preserved verbatim
in an :class:`OtherReferenceType` so that it round-trips unchanged.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "ReferenceType",
    "OtherReferenceType",
    "AnyReferenceType",
    "parse_reference_type",
    "format_reference_type",
]


class ReferenceType(StrEnum):
    """Standard RIS reference types, valued by their RIS code."""

    ABSTRACT = "ABST"
    AUDIOVISUAL_MATERIAL = "ADVS"
    AGGREGATED_DATABASE = "AGGR"
    ANCIENT_TEXT = "ANCIENT"
    ART_WORK = "ART"
    BILL = "BILL"
    BLOG = "BLOG"
    WHOLE_BOOK = "BOOK"
    CASE = "CASE"
    BOOK_CHAPTER = "CHAP"
    CHART = "CHART"
    CLASSICAL_WORK = "CLSWK"
    COMPUTER_PROGRAM = "COMP"
    CONFERENCE_PROCEEDING = "CONF"
    CONFERENCE_PAPER = "CPAPER"
    CATALOG = "CTLG"
    DATA_FILE = "DATA"
    ONLINE_DATABASE = "DBASE"
    DICTIONARY = "DICT"
    ELECTRONIC_BOOK = "EBOOK"
    ELECTRONIC_BOOK_SECTION = "ECHAP"
    EDITED_BOOK = "EDBOOK"
    ELECTRONIC_ARTICLE = "EJOUR"
    WEB_PAGE = "ELEC"
    ENCYCLOPEDIA = "ENCYC"
    EQUATION = "EQUA"
    FIGURE = "FIGURE"
    GENERIC = "GEN"
    GOVERNMENT_DOCUMENT = "GOVDOC"
    GRANT = "GRANT"
    HEARING = "HEAR"
    INTERNET_COMMUNICATION = "ICOMM"
    IN_PRESS = "INPR"
    JOURNAL_FULL = "JFULL"
    JOURNAL = "JOUR"
    LEGAL_RULE_OR_REGULATION = "LEGAL"
    MANUSCRIPT = "MANSCPT"
    MAP = "MAP"
    MAGAZINE_ARTICLE = "MGZN"
    MOTION_PICTURE = "MPCT"
    ONLINE_MULTIMEDIA = "MULTI"
    MUSIC_SCORE = "MUSIC"
    NEWSPAPER = "NEWS"
    PAMPHLET = "PAMP"
    PATENT = "PAT"
    PERSONAL_COMMUNICATION = "PCOMM"
    REPORT = "RPRT"
    SERIAL_PUBLICATION = "SER"
    SLIDE = "SLIDE"
    SOUND_RECORDING = "SOUND"
    STANDARD = "STAND"
    STATUTE = "STAT"
    THESIS_OR_DISSERTATION = "THES"
    UNPUBLISHED_WORK = "UNPB"
    VIDEO_RECORDING = "VIDEO"


@dataclass(frozen=True)
class OtherReferenceType:
    """Non-standard reference type, kept exactly as it appeared.

    Attributes
    ----------
    code : str
        Original ``TY`` value.
    """

    code: str

    def __str__(self) -> str:
        return self.code


AnyReferenceType = ReferenceType | OtherReferenceType

_BY_CODE: dict[str, ReferenceType] = {member.value: member for member in ReferenceType}


def parse_reference_type(code: str) -> AnyReferenceType:
    """Map a ``TY`` value to its reference type.

    Parameters
    ----------
    code : str
        Raw ``TY`` value.

    Returns
    -------
    AnyReferenceType
        Standard type for known codes, ``OtherReferenceType`` otherwise.
    """
    known = _BY_CODE.get(code)
    if known is None:
        return OtherReferenceType(code)
    return known


def format_reference_type(reference_type: AnyReferenceType) -> str:
    """Return the RIS code for a reference type."""
    if isinstance(reference_type, OtherReferenceType):
        return reference_type.code
    return reference_type.value
