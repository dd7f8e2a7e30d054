from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gedcom_records.core.diagnostics import Diagnostic


@dataclass
class ParseContext:
    """
    Shared pipeline context.
    Filled in by the pipeline as it runs: stats and diagnostics end up here.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    output_path: Optional[str] = None
    options: Any = None

    stats: Dict[str, Any] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    debug: bool = False
