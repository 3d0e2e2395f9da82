import logging
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

logger = logging.getLogger(__name__)


class FingerprintParameter(str, Enum):
    """
    Host attributes that can take part in a fingerprint.

    Member definition order is the canonical order: values are concatenated
    in this order and cache keys are normalized to it. Adding, removing or
    reordering members changes every fingerprint that includes them.
    """
    EOL = 'eol'
    ENDIANNESS = 'endianness'
    MANUFACTURER = 'manufacturer'
    MODEL = 'model'
    SERIAL = 'serial'
    UUID = 'uuid'
    VENDOR = 'vendor'
    BIOS_VERSION = 'bios_version'
    RELEASE_DATE = 'release_date'
    BOARD_MANUFACTURER = 'board_manufacturer'
    BOARD_MODEL = 'board_model'
    BOARD_SERIAL = 'board_serial'
    CPU_MANUFACTURER = 'cpu_manufacturer'
    BRAND = 'brand'
    SPEED_MAX = 'speed_max'
    CORES = 'cores'
    PHYSICAL_CORES = 'physical_cores'
    SOCKET = 'socket'
    MEM_TOTAL = 'mem_total'
    PLATFORM = 'platform'
    ARCH = 'arch'
    HDDS = 'hdds'

    def __str__(self):
        return self.value


FINGERPRINT_PARAMETERS: Tuple[str, ...] = tuple(p.value for p in FingerprintParameter)

ParameterName = Union[str, FingerprintParameter]
ParameterSubset = Tuple[FingerprintParameter, ...]


def _known(names: Union[ParameterName, Iterable[ParameterName]]) -> set:
    # a lone name is one parameter, not a sequence of letters
    if isinstance(names, str):
        names = (names,)
    known = set()
    for name in names:
        try:
            known.add(FingerprintParameter(name))
        except ValueError:
            logger.debug(f'ignoring unknown fingerprint parameter {name!r}')
    return known


def resolve_subset(
    only: Union[ParameterName, Iterable[ParameterName], None] = None,
    exclude: Union[ParameterName, Iterable[ParameterName], None] = None,
) -> ParameterSubset:
    """
    Resolve inclusive and exclusive filters into a canonical-ordered subset.

    Args:
        only: names to include, defaults to every parameter
        exclude: names to leave out, defaults to none

    A single name may be given in place of a collection of names.
    Unknown names are ignored. The order and repetition of the input never
    affect the result.
    """
    included = set(FingerprintParameter) if only is None else _known(only)
    excluded = set() if exclude is None else _known(exclude)
    return tuple(p for p in FingerprintParameter if p in included and p not in excluded)


def cache_key(subset: ParameterSubset) -> str:
    return ''.join(p.value for p in subset)
