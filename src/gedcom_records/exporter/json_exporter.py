"""
json_exporter.py
Structured JSON exporter for parsed GEDCOM data.

This exporter:
- Converts record dataclasses to dictionaries (NOT strings)
- Writes enums as their GEDCOM values ("M", "FAMC", "birth")
- Is deterministic: record order and field order follow the parse
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from gedcom_records.logging import get_logger
from gedcom_records.tree import GedcomData

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Enums → their value
    - Primitives pass through
    - dataclasses → dict (recursively)
    - dict → dict (recursively)
    - list / tuple / set → list (recursively)
    - Anything else → str(obj)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def build_data_dict(data: GedcomData) -> Dict[str, Any]:
    """
    Convert parsed GEDCOM data into a JSON-safe dict.
    """
    return {
        "header": _to_json_compatible(data.header),
        "individuals": [_to_json_compatible(r) for r in data.individuals],
        "families": [_to_json_compatible(r) for r in data.families],
        "sources": [_to_json_compatible(r) for r in data.sources],
        "repositories": [_to_json_compatible(r) for r in data.repositories],
        "submitters": [_to_json_compatible(r) for r in data.submitters],
    }


def serialize_data_to_json_string(data: GedcomData, indent: int | None = 2) -> str:
    return json.dumps(
        build_data_dict(data),
        indent=indent,
        ensure_ascii=False,
    )


def export_data_to_json(data: GedcomData, output_path: str | Path, indent: int | None = 2) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    stats = data.stats()
    log.info(
        "Exporting JSON to: %s "
        "(INDI=%d, FAM=%d, SOUR=%d, REPO=%d, SUBM=%d)",
        output_path,
        stats["individuals"],
        stats["families"],
        stats["sources"],
        stats["repositories"],
        stats["submitters"],
    )

    json_str = serialize_data_to_json_string(data, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
    return output_path
