# src/gedcom_records/records/event.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .common import CustomData, Note, SourceCitation


# ---------------------------------------------------------------------------
# Event Tag Definitions (GEDCOM 5.5.1 / 7.0)
# ---------------------------------------------------------------------------

INDIVIDUAL_EVENT_TAGS: frozenset[str] = frozenset({
    "ADOP", "BIRT", "BAPM", "BARM", "BASM", "BLES", "BURI", "CENS",
    "CHR", "CHRA", "CONF", "CREM", "DEAT", "EMIG", "FCOM", "GRAD",
    "IMMI", "NATU", "ORDN", "RETI", "RESI", "PROB", "WILL",
    "EVEN",  # EVEN = generic event
})

# Attributes share the event detail structure; their line value is the fact.
INDIVIDUAL_ATTRIBUTE_TAGS: frozenset[str] = frozenset({
    "CAST", "DSCR", "EDUC", "IDNO", "NATI", "NCHI", "NMR",
    "OCCU", "PROP", "RELI", "SSN", "TITL", "FACT",
})

FAMILY_EVENT_TAGS: frozenset[str] = frozenset({
    "ANUL", "CENS", "DIV", "DIVF", "ENGA",
    "MARB", "MARC", "MARL", "MARR", "MARS",
    "RESI", "EVEN",
})

# Events recorded by a source (SOUR.DATA.EVEN) are not tied to a tag.
OTHER_EVENT = "OTHER"

EVENT_KIND_MAP: Dict[str, str] = {
    "ADOP": "Adoption",
    "ANUL": "Annulment",
    "BAPM": "Baptism",
    "BARM": "Bar Mitzvah",
    "BASM": "Bas Mitzvah",
    "BIRT": "Birth",
    "BLES": "Blessing",
    "BURI": "Burial",
    "CAST": "Caste",
    "CENS": "Census",
    "CHR": "Christening",
    "CHRA": "Adult Christening",
    "CONF": "Confirmation",
    "CREM": "Cremation",
    "DEAT": "Death",
    "DIV": "Divorce",
    "DIVF": "Divorce Filed",
    "DSCR": "Physical Description",
    "EDUC": "Education",
    "EMIG": "Emigration",
    "ENGA": "Engagement",
    "EVEN": "Event",
    "FACT": "Fact",
    "FCOM": "First Communion",
    "GRAD": "Graduation",
    "IDNO": "Identification Number",
    "IMMI": "Immigration",
    "MARB": "Marriage Bann",
    "MARC": "Marriage Contract",
    "MARL": "Marriage License",
    "MARR": "Marriage",
    "MARS": "Marriage Settlement",
    "NATI": "Nationality",
    "NATU": "Naturalization",
    "NCHI": "Number of Children",
    "NMR": "Number of Marriages",
    "OCCU": "Occupation",
    "ORDN": "Ordination",
    "PROB": "Probate",
    "PROP": "Property",
    "RELI": "Religion",
    "RESI": "Residence",
    "RETI": "Retirement",
    "SSN": "Social Security Number",
    "TITL": "Title",
    "WILL": "Will",
    OTHER_EVENT: "Other",
}


def is_individual_event_tag(tag: str) -> bool:
    return tag in INDIVIDUAL_EVENT_TAGS


def is_individual_attribute_tag(tag: str) -> bool:
    return tag in INDIVIDUAL_ATTRIBUTE_TAGS


def is_family_event_tag(tag: str) -> bool:
    return tag in FAMILY_EVENT_TAGS


# ---------------------------------------------------------------------------
# Event
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Event:
    """
    A life or family event (BIRT, MARR, ...) with its detail lines.

    ``value`` holds the text on the event line itself; for SOUR.DATA.EVEN it is
    the comma list of event types the source records.
    """
    tag: str
    kind: str = "Other"
    value: Optional[str] = None
    date: Optional[str] = None
    place: Optional[str] = None
    event_type: Optional[str] = None
    cause: Optional[str] = None
    age: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    citations: List[SourceCitation] = field(default_factory=list)
    custom_data: List[CustomData] = field(default_factory=list)

    @classmethod
    def from_tag(cls, tag: str) -> "Event":
        return cls(tag=tag, kind=EVENT_KIND_MAP.get(tag, "Other"))

