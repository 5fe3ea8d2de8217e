from __future__ import annotations
import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class HighScoreStore(ABC):
    """Persistence for the best session score. Sessions only hold a reference."""

    @abstractmethod
    def get(self) -> int:
        ...

    @abstractmethod
    def set(self, value: int) -> None:
        ...


def _check(value: int) -> int:
    value = int(value)
    if value < 0:
        raise ValueError(f"High score cannot be negative: {value}")
    return value


class InMemoryHighScoreStore(HighScoreStore):
    def __init__(self, initial: int = 0):
        self._value = _check(initial)

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._value = _check(value)


class JsonFileHighScoreStore(HighScoreStore):
    """Single key in a JSON file; the file is created holding 0 on first read."""

    def __init__(self, path: Union[str, Path], key: str = 'high score'):
        self.path = Path(path)
        self.key = key

    def _load(self) -> Optional[dict]:
        """Parsed file contents, or None when the file does not exist yet."""
        try:
            with self.path.open('r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError:
            return None

    def _write(self, data: dict) -> None:
        if self.path.parent and not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + '.tmp')
        with tmp.open('w', encoding='utf-8') as f:
            json.dump(data, f)
        os.replace(tmp, self.path)

    def get(self) -> int:
        try:
            data = self._load()
        except (OSError, ValueError) as exc:
            # Leave an unreadable file alone; only set() replaces it
            logger.warning("Could not read high score file %s: %s", self.path, exc)
            return 0
        if data is None:
            self._write({self.key: 0})
            return 0
        raw = data.get(self.key) if isinstance(data, dict) else None
        if raw is None:
            return 0
        try:
            return _check(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed high score %r in %s", raw, self.path)
            return 0

    def set(self, value: int) -> None:
        value = _check(value)
        try:
            data = self._load()
        except (OSError, ValueError) as exc:
            logger.warning("Overwriting unreadable high score file %s: %s", self.path, exc)
            data = None
        if not isinstance(data, dict):
            data = {}
        data[self.key] = value
        self._write(data)
