from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .common import Address, CustomData


@dataclass(slots=True)
class Submitter:
    xref: Optional[str] = None
    name: Optional[str] = None
    address: Optional[Address] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    language: Optional[str] = None
    last_updated: Optional[str] = None
    custom_data: List[CustomData] = field(default_factory=list)
