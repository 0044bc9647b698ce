# randpw/config.py
"""
Simple settings persistence for randpw.
Settings saved as JSON in %APPDATA%/randpw/config.json (Windows) or ~/.randpw/config.json (fallback).
RANDPW_CONFIG points at a different file.
"""

import os
import json
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 25,
    "no_symbols": False,
    "clip": False,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "randpw")
    return os.path.join(os.path.expanduser("~"), ".randpw")

def config_path() -> str:
    override = os.getenv("RANDPW_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, keeping the default for any value of the wrong type
    out = DEFAULTS.copy()
    out.update(data)
    for key, default in DEFAULTS.items():
        if type(out[key]) is not type(default):
            logger.warning("ignoring config %s: %r must be %s", p, key, type(default).__name__)
            out[key] = default
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
