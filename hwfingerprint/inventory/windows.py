import csv
import json
import logging
from typing import Dict, List

from .base import BaseboardInfo, BiosInfo, BlockDevice, SystemInfo
from .common import run_command

logger = logging.getLogger(__name__)

_CIM_CLASSES = {
    'csproduct': 'Win32_ComputerSystemProduct',
    'bios': 'Win32_BIOS',
    'baseboard': 'Win32_BaseBoard',
    'cpu': 'Win32_Processor',
    'diskdrive': 'Win32_DiskDrive',
}

# DateTime properties are rendered in the CIM datetime layout wmic prints
_CIM_DATETIME_FIELDS = {'ReleaseDate'}


def parse_wmic_csv(output: str) -> List[Dict[str, str]]:
    '''wmic /format:csv output starts with blank lines, then a header row'''
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    return [
        {k: (v or '').strip() for k, v in row.items()}
        for row in csv.DictReader(lines)
    ]


def parse_cim_json(output: str) -> List[Dict[str, str]]:
    '''
    ConvertTo-Json prints nothing for no instances, an object for one and
    an array for several
    '''
    if not output.strip():
        return []
    data = json.loads(output)
    if isinstance(data, dict):
        data = [data]
    return [
        {k: '' if v is None else str(v).strip() for k, v in row.items()}
        for row in data
    ]


def _cim_select(field: str) -> str:
    if field in _CIM_DATETIME_FIELDS:
        return (f"@{{n='{field}';e={{if ($_.{field}) "
                f"{{$_.{field}.ToString('yyyyMMddHHmmss')}}}}}}")
    return field


def cim(alias: str, *fields: str) -> List[Dict[str, str]]:
    command = (f'Get-CimInstance -ClassName {_CIM_CLASSES[alias]}'
               f' | Select-Object {",".join(_cim_select(f) for f in fields)}'
               f' | ConvertTo-Json -Compress')
    output = run_command(['powershell', '-NoProfile', '-NonInteractive', '-Command', command])
    return parse_cim_json(output)


def wmic(alias: str, *fields: str) -> List[Dict[str, str]]:
    output = run_command(['wmic', alias, 'get', ','.join(fields), '/format:csv'])
    return parse_wmic_csv(output)


def query(alias: str, *fields: str) -> List[Dict[str, str]]:
    '''wmic where it is installed, CIM through PowerShell otherwise'''
    try:
        return wmic(alias, *fields)
    except FileNotFoundError:
        logger.debug(f'wmic not available, querying {_CIM_CLASSES[alias]} through PowerShell')
        return cim(alias, *fields)


def _first(alias: str, *fields: str) -> Dict[str, str]:
    rows = query(alias, *fields)
    return rows[0] if rows else {}


def format_release_date(value: str) -> str:
    # CIM datetime: yyyymmddHHMMSS.mmmmmmsUUU
    if len(value) >= 8 and value[:8].isdigit():
        return f'{value[0:4]}-{value[4:6]}-{value[6:8]}'
    return value


def system() -> SystemInfo:
    row = _first('csproduct', 'Vendor', 'Name', 'IdentifyingNumber', 'UUID')
    return SystemInfo(
        manufacturer=row.get('Vendor', ''),
        model=row.get('Name', ''),
        serial=row.get('IdentifyingNumber', ''),
        uuid=row.get('UUID', '').lower(),
    )


def bios() -> BiosInfo:
    row = _first('bios', 'Manufacturer', 'SMBIOSBIOSVersion', 'ReleaseDate')
    return BiosInfo(
        vendor=row.get('Manufacturer', ''),
        version=row.get('SMBIOSBIOSVersion', ''),
        release_date=format_release_date(row.get('ReleaseDate', '')),
    )


def baseboard() -> BaseboardInfo:
    row = _first('baseboard', 'Manufacturer', 'Product', 'SerialNumber')
    return BaseboardInfo(
        manufacturer=row.get('Manufacturer', ''),
        model=row.get('Product', ''),
        serial=row.get('SerialNumber', ''),
    )


def cpu_socket() -> str:
    return _first('cpu', 'SocketDesignation').get('SocketDesignation', '')


def block_devices() -> List[BlockDevice]:
    devices = []
    for row in query('diskdrive', 'Name', 'Model', 'SerialNumber', 'MediaType', 'InterfaceType'):
        media_type = row.get('MediaType', '')
        devices.append(BlockDevice(
            name=row.get('Name', ''),
            type='disk',
            removable='removable' in media_type.lower() or row.get('InterfaceType') == 'USB',
            model=row.get('Model', ''),
            serial=row.get('SerialNumber', ''),
        ))
    return devices
