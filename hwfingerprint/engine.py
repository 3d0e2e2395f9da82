import hashlib
from typing import Any, Mapping

from .parameters import FingerprintParameter, ParameterSubset

DIGEST_SIZE = 64

# sha512 of the empty string, the fingerprint of an empty subset
EMPTY_DIGEST = bytes.fromhex(
    'cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce'
    '47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e'
)


def to_canonical_string(value: Any) -> str:
    '''render an attribute value the way it enters the hash input'''
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return f'{value:.2f}'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ''.join(to_canonical_string(v) for v in value)
    return str(value)


def compute_digest(info: Mapping[str, Any], subset: ParameterSubset) -> bytes:
    """
    Hash the values of ``subset`` taken from ``info``.

    Values are concatenated without separators in canonical parameter order,
    whatever the order of ``subset``, and hashed with SHA-512.

    Returns:
        bytes: the 64 byte digest
    """
    selected = set(subset)
    data = ''.join(
        to_canonical_string(info[p.value]) for p in FingerprintParameter if p in selected
    )
    return hashlib.sha512(data.encode('utf-8')).digest()
