from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .common import CustomData, Note, SourceCitation
from .event import Event


@dataclass(slots=True)
class Family:
    xref: Optional[str] = None

    # HUSB / WIFE pointers
    individual1: Optional[str] = None
    individual2: Optional[str] = None
    children: List[str] = field(default_factory=list)

    events: List[Event] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)
    citations: List[SourceCitation] = field(default_factory=list)
    last_updated: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)

    def add_event(self, event: Event) -> None:
        self.events.append(event)

    def add_child(self, xref: str) -> None:
        self.children.append(xref)
