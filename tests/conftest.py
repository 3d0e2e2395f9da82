import asyncio

import pytest

from hwfingerprint.fingerprint import set_default_fingerprinter
from hwfingerprint.inventory import (
    BaseboardInfo,
    BiosInfo,
    BlockDevice,
    CpuInfo,
    InventoryCollector,
    MemInfo,
    OsInfo,
    SystemInfo,
)


class FakeCollector(InventoryCollector):

    def __init__(self, system=None, fail_on=None, error=None, delay=0):
        self.system_info = system or SystemInfo('Acme', 'X1', 'SN123', '4c4c4544-0000')
        self.fail_on = fail_on
        self.error = error or OSError('query failed')
        self.delay = delay
        self.calls = {}

    async def _answer(self, name, value):
        self.calls[name] = self.calls.get(name, 0) + 1
        await asyncio.sleep(self.delay)
        if name == self.fail_on:
            raise self.error
        return value

    async def system(self):
        return await self._answer('system', self.system_info)

    async def bios(self):
        return await self._answer('bios', BiosInfo('AcmeBIOS', '1.0.2', '2021-05-01'))

    async def baseboard(self):
        return await self._answer('baseboard', BaseboardInfo('AcmeBoard', 'B1', 'BSN9'))

    async def cpu(self):
        return await self._answer(
            'cpu', CpuInfo('Intel', 'Intel(R) Core(TM) i7', 3.6, 8, 4, 'LGA1200'))

    async def mem(self):
        return await self._answer('mem', MemInfo(17179869184))

    async def os_info(self):
        return await self._answer('os_info', OsInfo('linux', 'x64'))

    async def block_devices(self):
        return await self._answer('block_devices', [
            BlockDevice('sda', 'disk', False, 'Samsung SSD', 'S1'),
            BlockDevice('sdb', 'disk', True, 'USB Stick', 'U1'),
            BlockDevice('sr0', 'rom', False, 'DVD', 'D1'),
            BlockDevice('nvme0n1', 'disk', False, 'WD Black', 'W2'),
        ])


@pytest.fixture
def fake_collector_cls():
    return FakeCollector


@pytest.fixture
def collector():
    return FakeCollector()


@pytest.fixture
def reset_default():
    set_default_fingerprinter(None)
    yield
    set_default_fingerprinter(None)
