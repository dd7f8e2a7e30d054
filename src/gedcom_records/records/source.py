from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .common import Address, CustomData, Note, RepoCitation
from .event import Event


@dataclass(slots=True)
class SourceData:
    """SOUR.DATA: what the source records and who is responsible for it."""
    events: List[Event] = field(default_factory=list)
    agency: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    custom_data: List[CustomData] = field(default_factory=list)

    def add_event(self, event: Event) -> None:
        self.events.append(event)


@dataclass(slots=True)
class Source:
    xref: Optional[str] = None

    title: Optional[str] = None
    abbreviation: Optional[str] = None
    author: Optional[str] = None
    publication: Optional[str] = None
    text: Optional[str] = None
    data: SourceData = field(default_factory=SourceData)

    repo_citations: List[RepoCitation] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    last_updated: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)

    def add_repo_citation(self, citation: RepoCitation) -> None:
        self.repo_citations.append(citation)


@dataclass(slots=True)
class Repository:
    xref: Optional[str] = None
    name: Optional[str] = None
    address: Optional[Address] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    last_updated: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)
