from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ParserOptions:
    """
    Knobs for how strict the parser is.

    Attributes:
        strict_gender: Unknown SEX codes are fatal. When False they become
            ``Gender.UNKNOWN`` with a MalformedValue warning.
        strict_pedigree: Unknown PEDI values are fatal. When False the link
            keeps ``pedigree=None`` with a MalformedValue warning.
        accumulate_errors: Keep going after a faulty top-level record (which
            is dropped) so every fault in the file gets reported.
    """

    strict_gender: bool = True
    strict_pedigree: bool = True
    accumulate_errors: bool = False

    @classmethod
    def from_config(cls, cfg: Any) -> "ParserOptions":
        section = getattr(cfg, "parser", None) or {}
        return cls(
            strict_gender=bool(section.get("strict_gender", True)),
            strict_pedigree=bool(section.get("strict_pedigree", True)),
            accumulate_errors=bool(section.get("accumulate_errors", False)),
        )

    @classmethod
    def lenient(cls) -> "ParserOptions":
        return cls(strict_gender=False, strict_pedigree=False, accumulate_errors=True)
