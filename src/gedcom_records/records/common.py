from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


# -----------------------------
# Small substructures shared by several records
# -----------------------------

@dataclass(slots=True)
class CustomData:
    """
    Lossless capture of an extension (``_TAG``) line.

    Lines nested under the custom tag are kept verbatim as child CustomData,
    whatever their tag, so vendor extensions survive a parse untouched.
    """
    tag: str
    value: Optional[str] = None
    xref: Optional[str] = None
    children: List["CustomData"] = field(default_factory=list)


@dataclass(slots=True)
class Date:
    value: Optional[str] = None
    time: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class Copyright:
    value: Optional[str] = None
    continued: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class Encoding:
    """CHAR in the header, e.g. ``UTF-8`` with an optional VERS."""
    value: Optional[str] = None
    version: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class Translation:
    value: Optional[str] = None
    mime: Optional[str] = None
    language: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class Note:
    value: Optional[str] = None
    mime: Optional[str] = None
    language: Optional[str] = None
    translation: Optional[Translation] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class Address:
    value: Optional[str] = None
    adr1: Optional[str] = None
    adr2: Optional[str] = None
    adr3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    post: Optional[str] = None
    country: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class Corporation:
    value: Optional[str] = None
    address: Optional[Address] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    fax: Optional[str] = None
    website: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)


# -----------------------------
# Citations
# -----------------------------

QUALITY_LEVELS = ("0", "1", "2", "3")


@dataclass(slots=True)
class SourceCitation:
    """
    SOUR inside a record or event, with its PAGE and QUAY.

    A pointer value fills ``xref``; GEDCOM 5.5 also allows an unlinked citation
    whose value is the source description itself, kept in ``text``.
    """
    xref: Optional[str] = None
    text: Optional[str] = None
    page: Optional[str] = None
    quality: Optional[int] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class RepoCitation:
    xref: str
    call_number: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)
