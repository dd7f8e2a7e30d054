# src/gedcom_records/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at:
#   <project_root>/src/gedcom_records/utils/pathing.py
#
# Path(__file__).resolve().parents gives:
#   [0] .../src/gedcom_records/utils
#   [1] .../src/gedcom_records
#   [2] .../src
#   [3] .../ (project root)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory, the one that
    holds src/, tests/ and config/.
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("config/gedcom_records.yml")
        resolve_project_path(Path("tests") / "data" / "sample.ged")
    """
    return project_root() / Path(relative)


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under tests/data/.

    Examples:
        tests_data_path("sample.ged")
        tests_data_path("minimal.ged")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))
