import logging
import threading
from collections import namedtuple
from typing import Callable, Dict, Optional

from .parameters import ParameterSubset, cache_key

logger = logging.getLogger(__name__)

CacheInfo = namedtuple('CacheInfo', ['hits', 'misses', 'currsize'])


class FingerprintCache:
    """
    Digests keyed by the canonical-ordered parameter names they cover.

    There is no eviction, the number of entries is bounded by the number of
    parameter subsets. Computation happens outside the lock, so two callers
    racing on the same missing key may both compute; the first stored digest
    wins and is returned to both.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._store: Dict[str, bytes] = {}
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            return self._store.get(key)

    def put(self, key: str, digest: bytes) -> bytes:
        with self._lock:
            return self._store.setdefault(key, digest)

    def clear(self):
        with self._lock:
            self._store.clear()
            self._hits = 0
            self._misses = 0

    def get_or_compute(self, subset: ParameterSubset,
                       compute: Callable[[ParameterSubset], bytes]) -> bytes:
        key = cache_key(subset)
        with self._lock:
            digest = self._store.get(key)
            if digest is not None:
                self._hits += 1
                return digest
            self._misses += 1
        logger.debug(f'fingerprint cache miss for {len(subset)} parameters')
        return self.put(key, compute(subset))

    def cache_info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(self._hits, self._misses, len(self._store))

    def __len__(self):
        with self._lock:
            return len(self._store)

    def __contains__(self, key):
        with self._lock:
            return key in self._store
