from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .common import Copyright, Corporation, CustomData, Date, Encoding, Note

EXPECTED_GEDCOM_FORM = "LINEAGE-LINKED"


@dataclass(slots=True)
class GedcomDocument:
    """HEAD.GEDC: the GEDCOM version and form the file claims."""
    version: Optional[str] = None
    form: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class HeadSourData:
    value: Optional[str] = None
    date: Optional[Date] = None
    copyright: Optional[Copyright] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class HeadSource:
    """HEAD.SOUR: the product that wrote the file."""
    value: Optional[str] = None
    version: Optional[str] = None
    name: Optional[str] = None
    corporation: Optional[Corporation] = None
    data: Optional[HeadSourData] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class HeadPlac:
    jurisdictional_titles: List[str] = field(default_factory=list)
    custom_data: List[CustomData] = field(default_factory=list)

    def push_jurisdictional_title(self, title: str) -> None:
        self.jurisdictional_titles.append(title)


@dataclass(slots=True)
class Header:
    gedcom: Optional[GedcomDocument] = None
    source: Optional[HeadSource] = None
    destination: Optional[str] = None
    date: Optional[Date] = None
    submitter_tag: Optional[str] = None
    submission_tag: Optional[str] = None
    filename: Optional[str] = None
    copyright: Optional[Copyright] = None
    encoding: Optional[Encoding] = None
    language: Optional[str] = None
    note: Optional[Note] = None
    place: Optional[HeadPlac] = None
    custom_data: List[CustomData] = field(default_factory=list)
