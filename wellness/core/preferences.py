"""
Flat key-value preferences persisted as a JSON document.

This is the store that held the whole habit and mood collections before the
move to the SQL database, and it still holds the reminder settings.
"""
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from wellness.core.logging_config import log_warning


class PreferencesStore:
    """JSON-file backed key-value store. Every write is flushed to disk."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._values: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            log_warning(f"Ignoring unreadable preferences file: {exc}", path=str(self.path))
            return {}
        if not isinstance(data, dict):
            log_warning("Ignoring preferences file without a top-level object", path=str(self.path))
            return {}
        return data

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._values, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def contains(self, key: str) -> bool:
        return key in self._values

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._values.get(key)
        if value is None:
            return default
        return str(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._values.get(key)
        if isinstance(value, bool):
            return value
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._values.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return default
        return value

    def put(self, key: str, value: Any) -> None:
        self._values[key] = value
        self._flush()

    def remove(self, *keys: str) -> None:
        changed = False
        for key in keys:
            if key in self._values:
                del self._values[key]
                changed = True
        if changed:
            self._flush()

    def clear(self) -> None:
        self._values = {}
        self._flush()
