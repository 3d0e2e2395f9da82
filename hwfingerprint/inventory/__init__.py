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
from .host import HostInventoryCollector

__all__ = [
    "BaseboardInfo",
    "BiosInfo",
    "BlockDevice",
    "CpuInfo",
    "HostInventoryCollector",
    "InventoryCollector",
    "MemInfo",
    "OsInfo",
    "SystemInfo",
]
