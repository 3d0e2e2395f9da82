import json
import logging
from pathlib import Path
from typing import List

from ..envs import config
from .base import BaseboardInfo, BiosInfo, BlockDevice, SystemInfo
from .common import run_command

logger = logging.getLogger(__name__)


def read_dmi(name: str) -> str:
    """
    Read one DMI attribute from sysfs.

    Serial numbers and the product uuid are readable by root only, a missing
    or unreadable attribute reads as an empty string.
    """
    path = Path(config.DMI_DIR) / name
    try:
        return path.read_text(encoding='utf-8', errors='ignore').strip()
    except OSError as e:
        logger.debug(f'cannot read {path}: {e}')
        return ''


def system() -> SystemInfo:
    return SystemInfo(
        manufacturer=read_dmi('sys_vendor'),
        model=read_dmi('product_name'),
        serial=read_dmi('product_serial'),
        uuid=read_dmi('product_uuid').lower(),
    )


def bios() -> BiosInfo:
    return BiosInfo(
        vendor=read_dmi('bios_vendor'),
        version=read_dmi('bios_version'),
        release_date=read_dmi('bios_date'),
    )


def baseboard() -> BaseboardInfo:
    return BaseboardInfo(
        manufacturer=read_dmi('board_vendor'),
        model=read_dmi('board_name'),
        serial=read_dmi('board_serial'),
    )


def cpu_socket() -> str:
    # only exposed through dmidecode, which needs root
    return ''


def _removable(value) -> bool:
    # lsblk prints "0"/"1" before util-linux 2.33 and booleans after
    if isinstance(value, str):
        return value.strip() not in ('', '0')
    return bool(value)


def parse_lsblk(output: str) -> List[BlockDevice]:
    devices = []
    for item in json.loads(output).get('blockdevices', []):
        devices.append(BlockDevice(
            name=item.get('name') or '',
            type=item.get('type') or '',
            removable=_removable(item.get('rm')),
            model=(item.get('model') or '').strip(),
            serial=(item.get('serial') or '').strip(),
        ))
    return devices


def block_devices() -> List[BlockDevice]:
    output = run_command([
        'lsblk', '--json', '--nodeps', '--bytes',
        '--output', 'NAME,TYPE,RM,MODEL,SERIAL',
    ])
    return parse_lsblk(output)
