from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class SystemInfo:
    manufacturer: str = ''
    model: str = ''
    serial: str = ''
    uuid: str = ''


@dataclass(frozen=True)
class BiosInfo:
    vendor: str = ''
    version: str = ''
    release_date: str = ''


@dataclass(frozen=True)
class BaseboardInfo:
    manufacturer: str = ''
    model: str = ''
    serial: str = ''


@dataclass(frozen=True)
class CpuInfo:
    manufacturer: str = ''
    brand: str = ''
    # GHz
    speed_max: float = 0.0
    cores: int = 0
    physical_cores: int = 0
    socket: str = ''


@dataclass(frozen=True)
class MemInfo:
    # bytes
    total: int = 0


@dataclass(frozen=True)
class OsInfo:
    platform: str = ''
    arch: str = ''


@dataclass(frozen=True)
class BlockDevice:
    name: str = ''
    type: str = ''
    removable: bool = False
    model: str = ''
    serial: str = ''


class InventoryCollector(ABC):
    """
    Source of raw host attributes.

    Every query either returns its record or raises, a collector never
    substitutes fallback values for a failed query.
    """

    @abstractmethod
    async def system(self) -> SystemInfo:
        pass

    @abstractmethod
    async def bios(self) -> BiosInfo:
        pass

    @abstractmethod
    async def baseboard(self) -> BaseboardInfo:
        pass

    @abstractmethod
    async def cpu(self) -> CpuInfo:
        pass

    @abstractmethod
    async def mem(self) -> MemInfo:
        pass

    @abstractmethod
    async def os_info(self) -> OsInfo:
        pass

    @abstractmethod
    async def block_devices(self) -> List[BlockDevice]:
        pass
