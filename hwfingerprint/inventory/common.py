import logging
import platform
import re
import subprocess
import sys
from typing import Callable, List

import cpuinfo
import psutil

from ..envs import config
from .base import CpuInfo, MemInfo, OsInfo

logger = logging.getLogger(__name__)

_CPU_VENDORS = {
    'GenuineIntel': 'Intel',
    'AuthenticAMD': 'AMD',
    'HygonGenuine': 'Hygon',
    'CentaurHauls': 'VIA',
}

_BRAND_CLOCK = re.compile(r'@\s*([0-9]+(?:\.[0-9]+)?)\s*(GHz|MHz)', re.IGNORECASE)

_ARCHES = {
    'x86_64': 'x64',
    'amd64': 'x64',
    'i386': 'ia32',
    'i686': 'ia32',
    'x86': 'ia32',
    'aarch64': 'arm64',
    'arm64': 'arm64',
}


def run_command(args: List[str]) -> str:
    '''run an inventory command and return its stdout, raise if it fails'''
    logger.debug(f'running {" ".join(args)}')
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        timeout=config.COMMAND_TIMEOUT,
        check=True,
    )
    return result.stdout


def _cpu_manufacturer(vendor_id: str, brand: str) -> str:
    if vendor_id in _CPU_VENDORS:
        return _CPU_VENDORS[vendor_id]
    if not vendor_id and brand.startswith('Apple'):
        return 'Apple'
    return vendor_id


def _advertised_ghz(brand: str) -> float:
    '''clock printed in the brand string, e.g. "... CPU @ 2.60GHz"'''
    match = _BRAND_CLOCK.search(brand)
    if match is None:
        return 0.0
    value = float(match.group(1))
    return round(value / 1000 if match.group(2).lower() == 'mhz' else value, 2)


def _speed_max(brand: str) -> float:
    freq = psutil.cpu_freq()
    if freq is not None and freq.max:
        return round(freq.max / 1000, 2)
    # no cpufreq limits, the current clock drifts between runs so only a
    # clock stated in the brand string is stable enough to hash
    return _advertised_ghz(brand)


def cpu(read_socket: Callable[[], str]) -> CpuInfo:
    info = cpuinfo.get_cpu_info()
    brand = (info.get('brand_raw') or '').strip()
    return CpuInfo(
        manufacturer=_cpu_manufacturer(info.get('vendor_id_raw') or '', brand),
        brand=brand,
        speed_max=_speed_max(brand),
        cores=psutil.cpu_count(logical=True) or 0,
        physical_cores=psutil.cpu_count(logical=False) or 0,
        socket=read_socket(),
    )


def mem() -> MemInfo:
    return MemInfo(total=psutil.virtual_memory().total)


def os_info() -> OsInfo:
    machine = platform.machine()
    return OsInfo(
        platform=sys.platform,
        arch=_ARCHES.get(machine.lower(), machine),
    )
