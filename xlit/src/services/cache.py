"""Bounded FIFO caches shared by detection, correction, transliteration and translation."""

from __future__ import annotations
from collections import Counter
from itertools import islice
from threading import RLock
from typing import Any, Callable, Dict, Iterable, Optional

# Import cache
from cachetools import Cache

# Import config
from ..core.config import CACHE_EVICT_FRACTION, CACHE_SIZES

# Setup logger
from common.logger import setup_xlit_logger
log = setup_xlit_logger("cache")

_MISSING = object()


class BoundedCache(Cache):
    """FIFO cache that drops the oldest share of entries in one pass when full.

    Entries are ordered by first insertion; updating a key keeps its place.
    """

    def __init__(self, maxsize: int, evict_fraction: float = CACHE_EVICT_FRACTION):
        super().__init__(maxsize)
        self.evict_fraction = evict_fraction

    @property
    def evict_count(self) -> int:
        return max(1, int(self.maxsize * self.evict_fraction))

    def popitem(self):
        keys = list(islice(iter(self), self.evict_count))
        if not keys:
            raise KeyError(f"{type(self).__name__} is empty")
        first = (keys[0], self.pop(keys[0]))
        for key in keys[1:]:
            self.pop(key)
        log.debug(f"Evicted {len(keys)} entries (maxsize={self.maxsize})")
        return first


class CacheTier:
    """Named caches behind one lock, with hit/miss counters"""

    def __init__(self, sizes: Optional[Dict[str, int]] = None, evict_fraction: float = CACHE_EVICT_FRACTION):
        sizes = dict(CACHE_SIZES if sizes is None else sizes)
        self._caches: Dict[str, BoundedCache] = {
            name: BoundedCache(size, evict_fraction) for name, size in sizes.items()
        }
        self._hits: Counter = Counter()
        self._misses: Counter = Counter()
        self._lock = RLock()

    def __contains__(self, name: str) -> bool:
        return name in self._caches

    def get(self, name: str, key: str, default: Any = None) -> Any:
        with self._lock:
            value = self._caches[name].get(key, _MISSING)
            if value is _MISSING:
                self._misses[name] += 1
                return default
            self._hits[name] += 1
            return value

    def set(self, name: str, key: str, value: Any) -> None:
        with self._lock:
            self._caches[name][key] = value

    def get_or_compute(self, name: str, key: str, compute: Callable[[], Any]) -> Any:
        """Return the cached value or compute, store and return it.

        The computation runs outside the lock; two threads racing on the same
        key both compute and the later write wins.
        """
        with self._lock:
            value = self._caches[name].get(key, _MISSING)
            if value is not _MISSING:
                self._hits[name] += 1
                return value
            self._misses[name] += 1

        value = compute()

        with self._lock:
            self._caches[name][key] = value
        return value

    def clear(self, name: Optional[str] = None, keep: Iterable[str] = ()) -> None:
        with self._lock:
            targets = [name] if name else [n for n in self._caches if n not in keep]
            for target in targets:
                self._caches[target].clear()
                self._hits.pop(target, None)
                self._misses.pop(target, None)
        log.info(f"Cleared caches: {', '.join(targets)}")

    def stats(self) -> Dict[str, Dict[str, int]]:
        with self._lock:
            return {
                name: {
                    "size": len(cache),
                    "maxsize": int(cache.maxsize),
                    "hits": self._hits[name],
                    "misses": self._misses[name],
                }
                for name, cache in self._caches.items()
            }
