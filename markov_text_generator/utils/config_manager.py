# config_manager.py - JSON config manager for generation defaults

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "mode": "deterministic",  # probable / random / deterministic
    "length": 20,
    "seed": None,  # None -> fresh randomness each run
    "log_level": "WARNING",
}


def _is_int(val):
    return isinstance(val, int) and not isinstance(val, bool)


def _check(key, val):
    """Return the value to store for key, or raise ValueError if it is unusable."""
    if key == "mode":
        if isinstance(val, str):
            return val
    elif key == "length":
        if _is_int(val):
            return val
    elif key == "seed":
        if val is None or _is_int(val):
            return val
    elif key == "log_level":
        # getLevelName maps known names to their int level
        if isinstance(val, str) and isinstance(logging.getLevelName(val.upper()), int):
            return val.upper()
    raise ValueError(f"bad value {val!r}")


class Config:
    def __init__(self, path="markov_textgen.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: expected a JSON object", self.path)
            return
        for key, val in loaded.items():
            if key not in DEFAULTS:
                logger.warning("ignoring unknown config option %r in %s", key, self.path)
                continue
            try:
                self.data[key] = _check(key, val)
            except ValueError as e:
                logger.warning("config %s: %s for %r, using default %r", self.path, e, key, DEFAULTS[key])

    def get(self, key, default=None):
        return self.data.get(key, default)
