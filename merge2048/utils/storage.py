# -*- coding: utf-8 -*-
"""
Key-value backends that persist the best score between games.

The shell only relies on ``get``/``set``; ``load_best_score`` and ``save_best_score`` turn any backend
failure into the default value so a missing or broken store never interrupts play.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

# ##>: Module logger.
logger = logging.getLogger(__name__)


class BestScoreStore(Protocol):
    """Storage capability for a scalar best score."""

    def get(self, key: str) -> int:
        ...

    def set(self, key: str, value: int) -> None:
        ...


def _check_value(value: int) -> int:
    if value < 0:
        raise ValueError(f'best score must be non-negative, got {value}')
    return int(value)


class NullStore:
    """Store used when no persistence backend is available: reads 0, discards writes."""

    def get(self, key: str) -> int:
        return 0

    def set(self, key: str, value: int) -> None:
        _check_value(value)


class MemoryStore:
    """
    In-memory store.

    Parameters
    ----------
    values : dict, optional
        Initial content, copied.
    """

    def __init__(self, values: dict[str, int] | None = None):
        self.values: dict[str, int] = dict(values or {})

    def get(self, key: str) -> int:
        return self.values.get(key, 0)

    def set(self, key: str, value: int) -> None:
        self.values[key] = _check_value(value)


class JsonFileStore:
    """
    Store keeping every key in a single JSON document on disk.

    Parameters
    ----------
    path : Path
        Location of the JSON document. It is created on the first write.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        content = json.loads(self.path.read_text(encoding='utf-8'))
        if not isinstance(content, dict):
            raise ValueError(f'{self.path} does not hold a JSON object')
        return content

    def get(self, key: str) -> int:
        value = self._read().get(key, 0)
        return _check_value(int(value))

    def set(self, key: str, value: int) -> None:
        value = _check_value(value)
        try:
            content = self._read()
        except ValueError:
            logger.warning('Overwriting unreadable best score file %s', self.path)
            content = {}
        content[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # ##>: Staged write swapped into place, the target is never truncated.
        staging = self.path.with_name(self.path.name + '.tmp')
        staging.write_text(json.dumps(content), encoding='utf-8')
        staging.replace(self.path)


def open_store(path: Path | None) -> BestScoreStore:
    """
    Open the store described by a configuration path.

    Parameters
    ----------
    path : Path, optional
        JSON file location, or None to disable persistence.

    Returns
    -------
    BestScoreStore
        A ``JsonFileStore`` on ``path``, else a ``NullStore``.
    """
    if path is None:
        return NullStore()
    return JsonFileStore(path)


def load_best_score(store: BestScoreStore | None, key: str) -> int:
    """
    Read the best score, degrading to 0 when the store is missing or fails.

    Parameters
    ----------
    store : BestScoreStore, optional
        Backend to read from.
    key : str
        Key under which the best score is stored.

    Returns
    -------
    int
        The stored best score, or 0.
    """
    if store is None:
        return 0
    try:
        return store.get(key)
    except (OSError, ValueError, TypeError) as error:
        logger.warning('Cannot read best score %r: %s', key, error)
        return 0


def save_best_score(store: BestScoreStore | None, key: str, value: int) -> None:
    """Write the best score, logging and ignoring backend failures."""
    if store is None:
        return
    try:
        store.set(key, value)
    except OSError as error:
        logger.warning('Cannot write best score %r: %s', key, error)
