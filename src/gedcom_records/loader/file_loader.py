from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_records.logging import get_logger

log = get_logger("loader")


def load_file(path: Union[str, Path]) -> str:
    """
    Read a GEDCOM file into a string.

    Input is read as UTF-8 with undecodable bytes replaced; no other encoding
    conversion happens here.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    text = file_path.read_text(encoding="utf-8", errors="replace")
    log.info("Loaded file: %s (%d chars)", file_path, len(text))
    return text
