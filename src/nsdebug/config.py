"""Configuration management for nsdebug.

Layered resolution (highest priority wins):
  1. Explicit values — CLI flags or keyword arguments
  2. Environment — DEBUG, LOG_LEVEL, NO_COLOR
  3. Project config — .nsdebug.json in the working directory or above
  4. Defaults — nothing enabled, DEBUG threshold, color auto-detected

A project config looks like:

    {"filter": "app:*,db", "level": "info", "color": "auto", "pid": true}
"""

import json
import os
from pathlib import Path


CONFIG_FILENAME = ".nsdebug.json"

DEFAULTS = {
    "filter": "",
    "level": "DEBUG",
    "color": "auto",
    "pid": True,
}

COLOR_MODES = ("auto", "always", "never")

# Accepted value types per key; anything else falls through to the next layer
VALUE_TYPES = {
    "filter": (str,),
    "level": (str, int),
    "color": (str, bool),
    "pid": (bool,),
}


def _valid(key, value):
    if value is None:
        return False
    if isinstance(value, bool) and bool not in VALUE_TYPES[key]:
        return False
    return isinstance(value, VALUE_TYPES[key])


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .nsdebug.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, IsADirectoryError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_project_config(path=None, start_dir=None):
    """Load an explicit config file, or the nearest .nsdebug.json.

    Returns (config_dict, path_or_None).
    """
    if path is None:
        path = find_project_config(start_dir)
        if path is None:
            return {}, None
    return load_json(path), Path(path)


def env_config(environ=None):
    """Extract config values present in the environment."""
    env = os.environ if environ is None else environ
    values = {}
    if "DEBUG" in env:
        values["filter"] = env["DEBUG"]
    if env.get("LOG_LEVEL"):
        values["level"] = env["LOG_LEVEL"]
    if env.get("NO_COLOR"):
        values["color"] = "never"
    return values


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(overrides=None, environ=None, config_path=None, start_dir=None):
    """Resolve config values using layered precedence.

    Args:
        overrides: Explicit values (None entries are ignored)
        environ: Environment mapping (default: os.environ)
        config_path: Explicit config file, skips the upward search
        start_dir: Where the upward search for .nsdebug.json begins

    Returns:
        Dict with every key of DEFAULTS resolved. Values of the wrong type
        (e.g. a list filter, or "false" as a string for pid) are ignored.
    """
    project_cfg, _ = load_project_config(config_path, start_dir)
    layers = [
        {k: v for k, v in (overrides or {}).items() if v is not None},
        env_config(environ),
        project_cfg,
    ]

    resolved = {}
    for key, default in DEFAULTS.items():
        for layer in layers:
            if _valid(key, layer.get(key)):
                resolved[key] = layer[key]
                break
        else:
            resolved[key] = default

    if resolved["color"] is True:
        resolved["color"] = "always"
    elif resolved["color"] is False:
        resolved["color"] = "never"
    elif resolved["color"] not in COLOR_MODES:
        resolved["color"] = "auto"
    return resolved


def device_kwargs(resolved):
    """Translate a resolved config dict into Device() keyword arguments."""
    color = {"always": True, "never": False}.get(resolved.get("color"))
    return {
        "filter": resolved.get("filter") or "",
        "level": resolved.get("level"),
        "color": color,
        "show_pid": bool(resolved.get("pid", True)),
    }
