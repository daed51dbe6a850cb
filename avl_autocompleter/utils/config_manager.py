# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "wordlist": "data/words.txt",
    "max_suggestions": 0,  # 0 = no cap
    "min_distance": 1,
    "max_distance": 1,
    "lowercase_queries": True,
    "log_path": "logs/avl_autocompleter.log",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _cast(default, val):
    """Cast `val` to the type of `default` (strings from the CLI mostly)."""
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    return type(default)(val)


def _check_distances(data):
    """Spelling search needs 0 <= min_distance <= max_distance."""
    lo, hi = data["min_distance"], data["max_distance"]
    if lo < 0 or hi < lo:
        raise ValueError(f"need 0 <= min_distance <= max_distance, got {lo} and {hi}")


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("config %s unreadable, using defaults: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object, using defaults", self.path)
                return
            for key, val in loaded.items():
                if key not in DEFAULTS:
                    self.data[key] = val
                    continue
                try:
                    self.data[key] = _cast(DEFAULTS[key], val)
                except (TypeError, ValueError):
                    logger.warning("config %s: bad %s=%r, using default", self.path, key, val)
            try:
                _check_distances(self.data)
            except ValueError as e:
                logger.warning("config %s: %s, using default distances", self.path, e)
                self.data["min_distance"] = DEFAULTS["min_distance"]
                self.data["max_distance"] = DEFAULTS["max_distance"]
        else:
            self.save()

    def __getitem__(self, key):
        return self.data[key]

    def get(self, key, default=None):
        return self.data.get(key, default)

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self):
        return [f"{k:18} = {v}" for k, v in self.data.items()]

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        new = dict(self.data)
        new[key] = _cast(self.data[key], val)
        _check_distances(new)
        self.data = new
        self.save()
