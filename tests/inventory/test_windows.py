import subprocess
import unittest
from unittest.mock import patch

from hwfingerprint.inventory import windows

CSPRODUCT_OUTPUT = (
    "\r\n"
    "Node,IdentifyingNumber,Name,UUID,Vendor\r\n"
    "DESKTOP-1,PF1ABCDE,20QD0000US,4C4C4544-0042-3010-8052-B4C04F4E3532,LENOVO\r\n"
)

DISKDRIVE_OUTPUT = (
    "\r\n"
    "Node,InterfaceType,MediaType,Model,Name,SerialNumber\r\n"
    "DESKTOP-1,SCSI,Fixed hard disk media,Samsung SSD 970,\\\\.\\PHYSICALDRIVE0,0025_3881\r\n"
    "DESKTOP-1,USB,Removable Media,SanDisk Ultra USB,\\\\.\\PHYSICALDRIVE1,4C530001\r\n"
)

BIOS_CIM_OUTPUT = (
    '{"Manufacturer":"LENOVO","SMBIOSBIOSVersion":"N2HET63W (1.46 )",'
    '"ReleaseDate":"20210222000000"}\r\n'
)

DISKDRIVE_CIM_OUTPUT = (
    '[{"Name":"\\\\\\\\.\\\\PHYSICALDRIVE0","Model":"Samsung SSD 970","SerialNumber":"0025_3881",'
    '"MediaType":"Fixed hard disk media","InterfaceType":"SCSI"},'
    '{"Name":"\\\\\\\\.\\\\PHYSICALDRIVE1","Model":"SanDisk Ultra USB","SerialNumber":null,'
    '"MediaType":"Removable Media","InterfaceType":"USB"}]'
)


def without_wmic(cim_output):
    def run(args):
        if args[0] == 'wmic':
            raise FileNotFoundError(2, 'The system cannot find the file specified', 'wmic')
        return cim_output
    return run


class TestWmic(unittest.TestCase):
    """测试 wmic 输出解析"""

    def test_parse_wmic_csv(self):
        rows = windows.parse_wmic_csv(CSPRODUCT_OUTPUT)
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]['Vendor'], 'LENOVO')
        self.assertEqual(rows[0]['IdentifyingNumber'], 'PF1ABCDE')

    def test_parse_empty(self):
        self.assertEqual(windows.parse_wmic_csv('\r\n\r\n'), [])

    def test_format_release_date(self):
        self.assertEqual(windows.format_release_date('20210222000000.000000+000'), '2021-02-22')
        self.assertEqual(windows.format_release_date(''), '')
        self.assertEqual(windows.format_release_date('unknown'), 'unknown')

    def test_system(self):
        with patch('hwfingerprint.inventory.windows.run_command') as mock_run:
            mock_run.return_value = CSPRODUCT_OUTPUT
            info = windows.system()

            self.assertEqual(info.manufacturer, 'LENOVO')
            self.assertEqual(info.model, '20QD0000US')
            self.assertEqual(info.serial, 'PF1ABCDE')
            self.assertEqual(info.uuid, '4c4c4544-0042-3010-8052-b4c04f4e3532')
            mock_run.assert_called_once_with(
                ['wmic', 'csproduct', 'get', 'Vendor,Name,IdentifyingNumber,UUID', '/format:csv'])

    def test_block_devices(self):
        """测试可移动磁盘识别"""
        with patch('hwfingerprint.inventory.windows.run_command') as mock_run:
            mock_run.return_value = DISKDRIVE_OUTPUT
            devices = windows.block_devices()

            self.assertEqual(len(devices), 2)
            self.assertEqual(devices[0].type, 'disk')
            self.assertFalse(devices[0].removable)
            self.assertEqual(devices[0].model + devices[0].serial, 'Samsung SSD 9700025_3881')
            self.assertTrue(devices[1].removable)


class TestCimFallback(unittest.TestCase):
    """测试没有 wmic 时通过 PowerShell 查询 CIM"""

    def test_parse_cim_json(self):
        rows = windows.parse_cim_json(BIOS_CIM_OUTPUT)
        self.assertEqual(rows, [{
            'Manufacturer': 'LENOVO',
            'SMBIOSBIOSVersion': 'N2HET63W (1.46 )',
            'ReleaseDate': '20210222000000',
        }])
        self.assertEqual(windows.parse_cim_json(''), [])
        self.assertEqual(windows.parse_cim_json('[{"SocketDesignation":null}]'),
                         [{'SocketDesignation': ''}])

    def test_bios(self):
        with patch('hwfingerprint.inventory.windows.run_command') as mock_run:
            mock_run.side_effect = without_wmic(BIOS_CIM_OUTPUT)
            info = windows.bios()

            self.assertEqual(info.vendor, 'LENOVO')
            self.assertEqual(info.version, 'N2HET63W (1.46 )')
            self.assertEqual(info.release_date, '2021-02-22')

            args = mock_run.call_args.args[0]
            self.assertEqual(args[:2], ['powershell', '-NoProfile'])
            self.assertIn('Get-CimInstance -ClassName Win32_BIOS', args[-1])
            self.assertIn('ConvertTo-Json', args[-1])

    def test_block_devices(self):
        with patch('hwfingerprint.inventory.windows.run_command') as mock_run:
            mock_run.side_effect = without_wmic(DISKDRIVE_CIM_OUTPUT)
            devices = windows.block_devices()

            self.assertEqual(len(devices), 2)
            self.assertEqual(devices[0].name, '\\\\.\\PHYSICALDRIVE0')
            self.assertFalse(devices[0].removable)
            self.assertEqual(devices[0].model + devices[0].serial, 'Samsung SSD 9700025_3881')
            self.assertTrue(devices[1].removable)
            self.assertEqual(devices[1].serial, '')

    def test_same_answer_both_ways(self):
        """测试 wmic 与 CIM 两种方式得到相同的磁盘信息"""
        with patch('hwfingerprint.inventory.windows.run_command') as mock_run:
            mock_run.return_value = DISKDRIVE_OUTPUT
            via_wmic = windows.block_devices()
            mock_run.side_effect = without_wmic(DISKDRIVE_CIM_OUTPUT)
            via_cim = windows.block_devices()
        self.assertEqual([d.model + d.serial for d in via_wmic[:1]],
                         [d.model + d.serial for d in via_cim[:1]])
        self.assertEqual([d.removable for d in via_wmic], [d.removable for d in via_cim])

    def test_other_failures_propagate(self):
        with patch('hwfingerprint.inventory.windows.run_command') as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(1, 'wmic')
            with self.assertRaises(subprocess.CalledProcessError):
                windows.system()
            self.assertEqual(mock_run.call_count, 1)
