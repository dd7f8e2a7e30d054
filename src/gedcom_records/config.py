import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_records.yml"
CONFIG_ENV_VAR = "GEDCOM_RECORDS_CONFIG"

DEFAULTS = {
    "paths": {"logs_dir": "logs"},
    "parser": {
        "strict_gender": True,
        "strict_pedigree": True,
        "accumulate_errors": False,
    },
    "logging": {"level": "INFO", "file": "gedcom_records.log", "rotate": False, "to_file": True},
    "debug": False,
}


class GPConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.parser = {**DEFAULTS["parser"], **(data.get("parser") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = data.get("debug", False)


def config_path() -> Path:
    """Config file location; the environment variable wins over the project file."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path=None) -> 'GPConfig':
    path = Path(path) if path is not None else config_path()

    if not path.exists():
        if path != CONFIG_PATH:
            raise FileNotFoundError(f"Config file not found: {path}")
        # installed without the project tree: run on defaults
        return GPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GPConfig(data)

_config_cache = None

def get_config() -> 'GPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads it."""
    global _config_cache
    _config_cache = None
