
from .cache import CacheInfo, FingerprintCache
from .engine import DIGEST_SIZE, EMPTY_DIGEST, compute_digest
from .errors import CollectionFailure, FingerprintError, UnsupportedPlatform
from .fingerprint import (
    Fingerprinter,
    default_fingerprinter,
    get_fingerprint,
    get_fingerprinting_info,
    set_default_fingerprinter,
)
from .info import build_fingerprint_info
from .inventory import HostInventoryCollector, InventoryCollector
from .parameters import FINGERPRINT_PARAMETERS, FingerprintParameter, resolve_subset

__all__ = [
    "CacheInfo",
    "CollectionFailure",
    "DIGEST_SIZE",
    "EMPTY_DIGEST",
    "FINGERPRINT_PARAMETERS",
    "FingerprintCache",
    "FingerprintError",
    "FingerprintParameter",
    "Fingerprinter",
    "HostInventoryCollector",
    "InventoryCollector",
    "UnsupportedPlatform",
    "build_fingerprint_info",
    "compute_digest",
    "default_fingerprinter",
    "get_fingerprint",
    "get_fingerprinting_info",
    "resolve_subset",
    "set_default_fingerprinter",
]
