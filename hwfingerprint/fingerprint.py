import asyncio
import logging
import threading
from functools import partial
from typing import Iterable, Optional

from .cache import FingerprintCache
from .engine import compute_digest
from .errors import CollectionFailure
from .info import FingerprintInfo, build_fingerprint_info
from .inventory import HostInventoryCollector, InventoryCollector
from .parameters import FINGERPRINT_PARAMETERS, ParameterName, resolve_subset

logger = logging.getLogger(__name__)


class Fingerprinter:
    """
    Computes fingerprints of the host described by an inventory collector.

    The collector runs at most once per fingerprinter. Callers arriving while
    it runs wait for the same pass, and its outcome, info or
    ``CollectionFailure``, is final for the lifetime of the fingerprinter.

    Usage:
        fingerprinter = Fingerprinter()
        digest = await fingerprinter.get_fingerprint(only=['manufacturer', 'model'])
    """

    def __init__(self,
                 collector: Optional[InventoryCollector] = None,
                 cache: Optional[FingerprintCache] = None):
        self._collector = collector
        self.cache = cache if cache is not None else FingerprintCache()
        self._lock = threading.Lock()
        self._task: Optional[asyncio.Future] = None
        self._info: Optional[FingerprintInfo] = None
        self._error: Optional[CollectionFailure] = None

    @property
    def collector(self) -> InventoryCollector:
        if self._collector is None:
            self._collector = HostInventoryCollector()
        return self._collector

    @property
    def parameters(self):
        return FINGERPRINT_PARAMETERS

    async def _collect(self) -> FingerprintInfo:
        try:
            info = await build_fingerprint_info(self.collector)
        except CollectionFailure as e:
            self._error = e
            raise
        self._info = info
        return info

    async def get_fingerprinting_info(self) -> FingerprintInfo:
        if self._info is not None:
            return self._info
        if self._error is not None:
            raise self._error
        with self._lock:
            # a pass cancelled with its event loop has no outcome, start over
            if self._task is not None and self._task.cancelled():
                logger.debug('host inventory collection was cancelled, restarting it')
                self._task = None
            if self._task is None:
                self._task = asyncio.ensure_future(self._collect())
            task = self._task
        # a cancelled waiter must not cancel the pass the others wait on
        return await asyncio.shield(task)

    async def get_fingerprint(self,
                              only: Optional[Iterable[ParameterName]] = None,
                              exclude: Optional[Iterable[ParameterName]] = None) -> bytes:
        """
        Fingerprint of the host restricted to a subset of parameters.

        Args:
            only: parameter names to include, defaults to all of them
            exclude: parameter names to leave out, defaults to none

        Unknown names are ignored. Returns the 64 byte SHA-512 digest.
        """
        info = await self.get_fingerprinting_info()
        subset = resolve_subset(only, exclude)
        return self.cache.get_or_compute(subset, partial(compute_digest, info))

    def reset(self):
        '''drop cached digests, the collected info is kept'''
        self.cache.clear()


_default: Optional[Fingerprinter] = None
_default_lock = threading.Lock()


def default_fingerprinter() -> Fingerprinter:
    global _default
    with _default_lock:
        if _default is None:
            _default = Fingerprinter()
        return _default


def set_default_fingerprinter(fingerprinter: Optional[Fingerprinter]):
    global _default
    with _default_lock:
        _default = fingerprinter


async def get_fingerprinting_info() -> FingerprintInfo:
    return await default_fingerprinter().get_fingerprinting_info()


async def get_fingerprint(only: Optional[Iterable[ParameterName]] = None,
                          exclude: Optional[Iterable[ParameterName]] = None) -> bytes:
    return await default_fingerprinter().get_fingerprint(only=only, exclude=exclude)
