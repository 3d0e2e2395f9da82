import json
import re
from typing import Dict, List

from .base import BaseboardInfo, BiosInfo, BlockDevice, SystemInfo
from .common import run_command

# matches  "IOPlatformUUID" = "..."  and  "model" = <"MacBookPro15,1">
_IOREG_PROPERTY = re.compile(r'"([^"]+)"\s*=\s*<?"([^"]*)">?')

APPLE = 'Apple Inc.'


def parse_ioreg(output: str) -> Dict[str, str]:
    return {k: v for k, v in _IOREG_PROPERTY.findall(output)}


def _platform_expert() -> Dict[str, str]:
    return parse_ioreg(run_command(['ioreg', '-rd1', '-c', 'IOPlatformExpertDevice']))


def _system_profiler(*data_types: str) -> dict:
    return json.loads(run_command(['system_profiler', *data_types, '-json']))


def system() -> SystemInfo:
    props = _platform_expert()
    return SystemInfo(
        manufacturer=props.get('manufacturer', APPLE),
        model=props.get('model', ''),
        serial=props.get('IOPlatformSerialNumber', ''),
        uuid=props.get('IOPlatformUUID', '').lower(),
    )


def bios() -> BiosInfo:
    hardware = _system_profiler('SPHardwareDataType').get('SPHardwareDataType') or [{}]
    return BiosInfo(
        vendor=APPLE,
        version=hardware[0].get('boot_rom_version', ''),
    )


def baseboard() -> BaseboardInfo:
    props = _platform_expert()
    return BaseboardInfo(
        manufacturer=APPLE,
        model=props.get('board-id', ''),
    )


def cpu_socket() -> str:
    return ''


def parse_storage(data: dict) -> List[BlockDevice]:
    devices = []
    for controllers in data.values():
        for controller in controllers:
            for drive in controller.get('_items', []):
                devices.append(BlockDevice(
                    name=drive.get('bsd_name', drive.get('_name', '')),
                    type='disk',
                    removable=drive.get('removable_media', 'no') != 'no',
                    model=drive.get('device_model', '').strip(),
                    serial=drive.get('device_serial', '').strip(),
                ))
    return devices


def block_devices() -> List[BlockDevice]:
    return parse_storage(_system_profiler('SPNVMeDataType', 'SPSerialATADataType'))
