"""
Typed records produced by the parser.

Every record is a plain dataclass built empty and filled in field by field by
its parse routine; records own their substructures, nothing is shared.
"""

from .common import (
    Address,
    Copyright,
    Corporation,
    CustomData,
    Date,
    Encoding,
    Note,
    RepoCitation,
    SourceCitation,
    Translation,
)
from .event import (
    EVENT_KIND_MAP,
    FAMILY_EVENT_TAGS,
    INDIVIDUAL_ATTRIBUTE_TAGS,
    INDIVIDUAL_EVENT_TAGS,
    OTHER_EVENT,
    Event,
    is_family_event_tag,
    is_individual_attribute_tag,
    is_individual_event_tag,
)
from .family import Family
from .header import GedcomDocument, HeadPlac, HeadSourData, HeadSource, Header
from .individual import FamilyLink, FamilyLinkType, Gender, Individual, Name, Pedigree
from .source import Repository, Source, SourceData
from .submitter import Submitter

__all__ = [
    "Address",
    "Copyright",
    "Corporation",
    "CustomData",
    "Date",
    "Encoding",
    "Note",
    "RepoCitation",
    "SourceCitation",
    "Translation",
    "EVENT_KIND_MAP",
    "FAMILY_EVENT_TAGS",
    "INDIVIDUAL_ATTRIBUTE_TAGS",
    "INDIVIDUAL_EVENT_TAGS",
    "OTHER_EVENT",
    "Event",
    "is_family_event_tag",
    "is_individual_attribute_tag",
    "is_individual_event_tag",
    "Family",
    "GedcomDocument",
    "HeadPlac",
    "HeadSourData",
    "HeadSource",
    "Header",
    "FamilyLink",
    "FamilyLinkType",
    "Gender",
    "Individual",
    "Name",
    "Pedigree",
    "Repository",
    "Source",
    "SourceData",
    "Submitter",
]
