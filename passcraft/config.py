# passcraft/config.py
"""
Simple settings persistence for passcraft.
Settings saved as JSON in $PASSCRAFT_HOME/config.json, %APPDATA%/Passcraft/config.json
(Windows) or ~/.passcraft/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any

from .generator import PasswordConfig

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 32,
    "uppercase": True,
    "lowercase": True,
    "digits": True,
    "symbols": True,
    "copies": 1,
    "log_level": "WARNING",
}

# also the API's per-request limit
MAX_COPIES = 100
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

def _settings_dir() -> str:
    home = os.getenv("PASSCRAFT_HOME")
    if home:
        return home
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Passcraft")
    return os.path.join(os.path.expanduser("~"), ".passcraft")

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _valid_setting(key: str, value: Any) -> bool:
    if key == "length":
        return _is_int(value)
    if key == "copies":
        return _is_int(value) and 1 <= value <= MAX_COPIES
    if key == "log_level":
        return isinstance(value, str) and value.upper() in LOG_LEVELS
    # character class flags
    return isinstance(value, bool)

def config_path() -> str:
    return os.path.join(_settings_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, dropping keys we don't know about
    out = DEFAULTS.copy()
    for k, v in data.items():
        if k not in DEFAULTS:
            continue
        if not _valid_setting(k, v):
            logger.warning("ignoring invalid setting %s=%r in %s, using %r", k, v, p, DEFAULTS[k])
            continue
        out[k] = v
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    os.makedirs(os.path.dirname(p), exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def config_from_settings(cfg: Dict[str, Any]) -> PasswordConfig:
    """Build the working PasswordConfig from loaded settings."""
    return PasswordConfig(
        length=cfg.get("length", DEFAULTS["length"]),
        use_uppercase=bool(cfg.get("uppercase", True)),
        use_lowercase=bool(cfg.get("lowercase", True)),
        use_digits=bool(cfg.get("digits", True)),
        use_symbols=bool(cfg.get("symbols", True)),
    )
