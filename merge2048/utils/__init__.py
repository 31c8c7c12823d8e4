# -*- coding: utf-8 -*-
"""
Utilities around the 2048 session: best score storage backends.

The matplotlib ``WindowBoard`` lives in ``merge2048.utils.windows`` and is imported on demand.
"""

from .storage import (
    BestScoreStore,
    JsonFileStore,
    MemoryStore,
    NullStore,
    load_best_score,
    open_store,
    save_best_score,
)

__all__ = [
    "BestScoreStore",
    "JsonFileStore",
    "MemoryStore",
    "NullStore",
    "load_best_score",
    "open_store",
    "save_best_score",
]
