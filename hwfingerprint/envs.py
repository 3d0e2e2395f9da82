import os
from dataclasses import dataclass, field


@dataclass
class Config:
    LOG_LEVEL: str = field(init=False)
    DMI_DIR: str = field(init=False)
    COMMAND_TIMEOUT: float = field(init=False)

    def __post_init__(self):
        self.reload()

    def reload(self):
        self.LOG_LEVEL = os.environ.get('HWFP_LOG_LEVEL', 'WARNING').upper()
        # sysfs DMI directory, point it at a host mount when running in a container
        self.DMI_DIR = os.environ.get('HWFP_DMI_DIR', '/sys/class/dmi/id')
        self.COMMAND_TIMEOUT = float(os.environ.get('HWFP_COMMAND_TIMEOUT', 10))


config = Config()
