# screengrid/server/layout_cache.py
"""LRU cache for generated layouts, keyed by seed and bias."""

from __future__ import annotations

import logging
from collections import OrderedDict

from screengrid.screen import ScreenLayout

from .config import settings

logger = logging.getLogger("screengrid.server")


class LayoutCache:
    """LRU cache for immutable layouts."""

    def __init__(self, max_size: int | None = None) -> None:
        self._cache: OrderedDict[str, ScreenLayout] = OrderedDict()
        self._max_size = max_size or settings.LAYOUT_CACHE_MAX

    @staticmethod
    def key(seed: int, bias: str) -> str:
        return f"{bias}:{seed}"

    def get(self, key: str) -> ScreenLayout | None:
        """Get layout by key, updating LRU order."""
        if key in self._cache:
            self._cache.move_to_end(key)
            return self._cache[key]
        return None

    def put(self, key: str, layout: ScreenLayout) -> None:
        if key in self._cache:
            self._cache.move_to_end(key)
            return
        self._cache[key] = layout
        while len(self._cache) > self._max_size:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug(f"Evicted layout {evicted} from cache")

    def clear(self) -> None:
        self._cache.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)


# Global instance
layout_cache = LayoutCache()
