import asyncio
import logging
import sys
from typing import List, Optional

from ..errors import UnsupportedPlatform
from . import common, darwin, linux, windows
from .base import (
    BaseboardInfo,
    BiosInfo,
    BlockDevice,
    CpuInfo,
    InventoryCollector,
    MemInfo,
    OsInfo,
    SystemInfo,
)

logger = logging.getLogger(__name__)

_PLATFORM_MODULES = {
    'linux': linux,
    'win32': windows,
    'darwin': darwin,
}


class HostInventoryCollector(InventoryCollector):
    """
    Collects the attributes of the machine the process runs on.

    Queries are blocking (sysfs reads, subprocesses, psutil) and run in a
    worker thread so that the event loop stays responsive.
    """

    def __init__(self, sys_platform: Optional[str] = None):
        self.sys_platform = sys_platform or sys.platform
        self._platform = _PLATFORM_MODULES.get(self.sys_platform)

    def _query(self, name: str):
        if self._platform is None:
            raise UnsupportedPlatform(f'no inventory queries for platform {self.sys_platform}')
        return getattr(self._platform, name)

    async def system(self) -> SystemInfo:
        return await asyncio.to_thread(self._query('system'))

    async def bios(self) -> BiosInfo:
        return await asyncio.to_thread(self._query('bios'))

    async def baseboard(self) -> BaseboardInfo:
        return await asyncio.to_thread(self._query('baseboard'))

    async def cpu(self) -> CpuInfo:
        return await asyncio.to_thread(common.cpu, self._query('cpu_socket'))

    async def mem(self) -> MemInfo:
        return await asyncio.to_thread(common.mem)

    async def os_info(self) -> OsInfo:
        return await asyncio.to_thread(common.os_info)

    async def block_devices(self) -> List[BlockDevice]:
        return await asyncio.to_thread(self._query('block_devices'))
