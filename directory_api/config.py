import os
from copy import deepcopy

import yaml

# ----------------------------
# Configuration
# ----------------------------
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
CONFIG_DIR = os.path.join(ROOT_DIR, "config")
SET_FILE = os.path.join(CONFIG_DIR, "settings.yaml")

# Safe defaults if the YAML file is missing
DEFAULTS = {
    "database": {"url": "sqlite:///./directory.db"},
    "api": {
        "namespace": "/api/v1",
        "base_url": "http://localhost:8000",
    },
    "pagination": {
        "default_page_size": 20,
        "max_page_size": 1000,
        "resources": {"employees": 1000},
    },
    "seed": {
        "enabled": True,
        "departments": "data/departments.csv",
        "employees": "data/employees.csv",
    },
    "logging": {"level": "INFO"},
}


def _load_yaml(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _merge(base: dict, override: dict) -> dict:
    out = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_settings(path: str = SET_FILE) -> dict:
    """
    Built-in defaults, overlaid by settings.yaml, overlaid by environment.
    - DATABASE_URL / SQLITE_URL: store location (SQLITE_URL wins)
    - TESTING=1: throwaway sqlite file
    - LOG_LEVEL, SEED_ENABLED
    """
    settings = _merge(DEFAULTS, _load_yaml(path))

    if os.getenv("DATABASE_URL"):
        settings["database"]["url"] = os.getenv("DATABASE_URL")
    if os.getenv("SQLITE_URL"):
        settings["database"]["url"] = os.getenv("SQLITE_URL")
    if os.getenv("TESTING", "0") == "1":
        settings["database"]["url"] = "sqlite:///./test.db"

    if os.getenv("LOG_LEVEL"):
        settings["logging"]["level"] = os.getenv("LOG_LEVEL")
    if os.getenv("SEED_ENABLED"):
        settings["seed"]["enabled"] = os.getenv("SEED_ENABLED").lower() in ("1", "true", "yes")

    return settings


SETTINGS = load_settings()


def resolve_path(source: str) -> str:
    # Relative seed paths are anchored at the project root
    if source.startswith(("http://", "https://")) or os.path.isabs(source):
        return source
    return os.path.join(ROOT_DIR, source)
