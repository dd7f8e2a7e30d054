from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .common import CustomData, Note, SourceCitation
from .event import Event


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    NONBINARY = "N"
    UNKNOWN = "U"

    @classmethod
    def from_code(cls, code: str) -> "Gender":
        """Map a SEX code letter; raises ValueError outside M/F/N/U."""
        return cls(code.strip())


class Pedigree(str, Enum):
    ADOPTED = "adopted"
    BIRTH = "birth"
    FOSTER = "foster"
    SEALING = "sealing"

    @classmethod
    def from_text(cls, text: str) -> "Pedigree":
        """Case-insensitive PEDI lookup; raises ValueError for other words."""
        return cls(text.strip().lower())


class FamilyLinkType(str, Enum):
    CHILD = "FAMC"
    SPOUSE = "FAMS"


@dataclass(slots=True)
class FamilyLink:
    """FAMC / FAMS pointer from an individual to a family."""
    xref: str
    link_type: FamilyLinkType
    pedigree: Optional[Pedigree] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class Name:
    """
    GEDCOM NAME substructure.

    ``value`` is the full name line, e.g. "John /Doe/"; the pieces are only
    set when the file spells them out with GIVN, SURN, ...
    """
    value: Optional[str] = None
    given: Optional[str] = None
    surname: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    surname_prefix: Optional[str] = None
    nickname: Optional[str] = None
    name_type: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class Individual:
    xref: Optional[str] = None

    names: List[Name] = field(default_factory=list)
    sex: Optional[Gender] = None
    events: List[Event] = field(default_factory=list)
    attributes: List[Event] = field(default_factory=list)
    families: List[FamilyLink] = field(default_factory=list)

    notes: List[Note] = field(default_factory=list)
    citations: List[SourceCitation] = field(default_factory=list)
    last_updated: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)

    @property
    def name(self) -> Optional[Name]:
        return self.names[0] if self.names else None

    def add_event(self, event: Event) -> None:
        self.events.append(event)

    def add_attribute(self, attribute: Event) -> None:
        self.attributes.append(attribute)

    def add_family(self, link: FamilyLink) -> None:
        self.families.append(link)

    def child_links(self) -> List[FamilyLink]:
        return [f for f in self.families if f.link_type is FamilyLinkType.CHILD]

    def spouse_links(self) -> List[FamilyLink]:
        return [f for f in self.families if f.link_type is FamilyLinkType.SPOUSE]
