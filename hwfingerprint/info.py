import asyncio
import logging
import os
import sys
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple, Union

from .errors import CollectionFailure
from .inventory import BlockDevice, InventoryCollector
from .parameters import FINGERPRINT_PARAMETERS, FingerprintParameter as P

logger = logging.getLogger(__name__)

AttributeValue = Union[str, int, float, Tuple[str, ...]]
FingerprintInfo = Mapping[str, AttributeValue]


def endianness() -> str:
    return 'LE' if sys.byteorder == 'little' else 'BE'


def fixed_disk_ids(devices: Iterable[BlockDevice]) -> Tuple[str, ...]:
    '''model + serial of every non removable disk, in collector order'''
    return tuple(
        d.model + d.serial
        for d in devices
        if d.type == 'disk' and not d.removable
    )


async def build_fingerprint_info(collector: InventoryCollector) -> FingerprintInfo:
    """
    Query every attribute group and assemble the canonical-ordered info.

    Raises:
        CollectionFailure: any query raised, no partial info is produced
    """
    try:
        system, bios, board, cpu, mem, os_info, devices = await asyncio.gather(
            collector.system(),
            collector.bios(),
            collector.baseboard(),
            collector.cpu(),
            collector.mem(),
            collector.os_info(),
            collector.block_devices(),
        )
        info = {
            P.EOL: os.linesep,
            P.ENDIANNESS: endianness(),
            P.MANUFACTURER: system.manufacturer,
            P.MODEL: system.model,
            P.SERIAL: system.serial,
            P.UUID: system.uuid,
            P.VENDOR: bios.vendor,
            P.BIOS_VERSION: bios.version,
            P.RELEASE_DATE: bios.release_date,
            P.BOARD_MANUFACTURER: board.manufacturer,
            P.BOARD_MODEL: board.model,
            P.BOARD_SERIAL: board.serial,
            P.CPU_MANUFACTURER: cpu.manufacturer,
            P.BRAND: cpu.brand,
            P.SPEED_MAX: round(float(cpu.speed_max), 2),
            P.CORES: int(cpu.cores),
            P.PHYSICAL_CORES: int(cpu.physical_cores),
            P.SOCKET: cpu.socket,
            P.MEM_TOTAL: int(mem.total),
            P.PLATFORM: os_info.platform,
            P.ARCH: os_info.arch,
            P.HDDS: fixed_disk_ids(devices),
        }
    except Exception as e:
        logger.error(f'host inventory collection failed: {e!r}')
        raise CollectionFailure(f'host inventory collection failed: {e}') from e

    logger.info(f'collected {len(info)} host attributes')
    return MappingProxyType({name: info[P(name)] for name in FINGERPRINT_PARAMETERS})
