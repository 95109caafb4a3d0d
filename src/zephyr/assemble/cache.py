"""Memoizing cache from a class's base segment to its resolution."""

from __future__ import annotations

import logging
import threading
import zlib
from collections import OrderedDict
from typing import Callable

from zephyr.model.resolution import UtilityResolution

logger = logging.getLogger(__name__)

_MISS = object()


class _Shard:
    __slots__ = ("lock", "entries", "capacity")

    def __init__(self, capacity: int) -> None:
        self.lock = threading.Lock()
        self.entries: OrderedDict[str, object] = OrderedDict()
        self.capacity = capacity


class ResolutionCache:
    """A sharded LRU cache that also remembers misses.

    The key is the base segment with variants stripped (``bg-blue-500/50``),
    so ``hover:bg-blue-500`` and ``md:bg-blue-500`` share an entry.  Each
    shard has its own lock; a size of 0 disables caching entirely.
    """

    def __init__(self, size: int = 1024, shards: int = 8) -> None:
        self.size = size
        shards = max(1, min(shards, size)) if size else 1
        per_shard = -(-size // shards) if size else 0
        self._shards = [_Shard(per_shard) for _ in range(shards)]
        self.hits = 0
        self.misses = 0

    @property
    def enabled(self) -> bool:
        return self.size > 0

    def _shard(self, key: str) -> _Shard:
        return self._shards[zlib.crc32(key.encode("utf-8")) % len(self._shards)]

    def get_or_resolve(
        self,
        key: str,
        resolve: Callable[[], UtilityResolution | None],
    ) -> UtilityResolution | None:
        """Return the cached resolution for *key*, computing it on a miss."""
        if not self.enabled:
            return resolve()
        shard = self._shard(key)
        with shard.lock:
            cached = shard.entries.get(key, _MISS)
            if cached is not _MISS:
                shard.entries.move_to_end(key)
                self.hits += 1
                return cached  # type: ignore[return-value]
        # Resolved outside the lock; resolvers are pure.
        result = resolve()
        with shard.lock:
            self.misses += 1
            shard.entries[key] = result
            shard.entries.move_to_end(key)
            while len(shard.entries) > shard.capacity:
                evicted, _ = shard.entries.popitem(last=False)
                logger.debug("resolution cache evicted %r", evicted)
        return result

    def clear(self) -> None:
        for shard in self._shards:
            with shard.lock:
                shard.entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return sum(len(s.entries) for s in self._shards)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not self.enabled:
            return False
        shard = self._shard(key)
        with shard.lock:
            return key in shard.entries
