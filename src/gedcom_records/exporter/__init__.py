"""
Exporter package.

Re-exports the JSON export entry points used by the pipeline and the CLI.
"""

from __future__ import annotations

from .json_exporter import build_data_dict, export_data_to_json, serialize_data_to_json_string

__all__ = ["build_data_dict", "export_data_to_json", "serialize_data_to_json_string"]
