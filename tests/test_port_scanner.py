"""
Unit tests for port auto-detection

Tests port_scanner.py scan order, handshake and handle cleanup
"""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, PropertyMock, patch

import serial

from radarscope.serial.connection import SerialConnection
from radarscope.serial.port_scanner import (
    candidate_ports,
    detect,
    open_manual,
    reset_board,
    wait_for_signature,
)
from radarscope.utils.exceptions import (
    DetectionExhausted,
    EndpointOpenFailed,
    HandshakeTimeout,
)
from fake_serial import FakeClock, FakeConnection


class ScriptedPorts:
    """Connection factory handing out scripted FakeConnections by name"""

    def __init__(self, scripts):
        self.scripts = scripts
        self.created = []

    def __call__(self, name, baud_rate):
        script = self.scripts.get(name, {})
        conn = FakeConnection(name, baud_rate, **script)
        self.created.append(conn)
        return conn


class TestDetect(unittest.TestCase):
    """Test signature-based auto-detection"""

    def setUp(self):
        """Set up test fixtures"""
        self.clock = FakeClock()

    def _detect(self, names, factory, **kwargs):
        return detect("RADAR_READY", 9600, names,
                      connection_factory=factory,
                      clock=self.clock, sleep=self.clock.sleep, **kwargs)

    def test_returns_first_responding_port_in_order(self):
        """Test that ports 1..k are tried in order and k is returned open"""
        names = ["COM1", "COM2", "COM3", "COM4"]
        factory = ScriptedPorts({
            "COM1": {"chunks": [b"hello\n"]},
            "COM2": {"chunks": [b"12\n34\n"]},
            "COM3": {"chunks": [b"BOOT\r\n", b"RADAR_READY\r\n"]},
            "COM4": {"chunks": [b"RADAR_READY\r\n"]},
        })

        conn = self._detect(names, factory)

        self.assertEqual(conn.port_name, "COM3")
        self.assertTrue(conn.is_open())
        self.assertEqual([c.port_name for c in factory.created], ["COM1", "COM2", "COM3"])
        for failed in factory.created[:2]:
            self.assertFalse(failed.is_open())
            self.assertEqual(failed.close_count, 1)
        self.assertEqual(factory.created[2].close_count, 0)

    def test_skips_ports_that_fail_to_open(self):
        """Test that an unopenable port is skipped"""
        factory = ScriptedPorts({
            "COM1": {"fail_open": True},
            "COM2": {"chunks": [b"RADAR_READY\n"]},
        })

        conn = self._detect(["COM1", "COM2"], factory)

        self.assertEqual(conn.port_name, "COM2")
        self.assertEqual(factory.created[0].open_count, 0)

    def test_exhausted_when_nothing_responds(self):
        """Test DetectionExhausted lists every port tried"""
        factory = ScriptedPorts({"COM2": {"fail_open": True}})

        with self.assertRaises(DetectionExhausted) as ctx:
            self._detect(["COM1", "COM2", "COM3"], factory)

        self.assertEqual(ctx.exception.tried, ["COM1", "COM2", "COM3"])
        self.assertEqual(ctx.exception.signature, "RADAR_READY")
        for conn in factory.created:
            self.assertFalse(conn.is_open())

    def test_exhausted_with_no_candidates(self):
        """Test an empty candidate list"""
        with self.assertRaises(DetectionExhausted):
            self._detect([], ScriptedPorts({}))

    def test_handshake_resets_board(self):
        """Test DTR is deasserted then reasserted and buffers flushed"""
        factory = ScriptedPorts({"COM1": {"chunks": [b"RADAR_READY\n"]}})

        conn = self._detect(["COM1"], factory, settle=0.08)

        self.assertEqual(conn.dtr_history, [False, True])
        self.assertEqual(conn.flush_count, 1)
        self.assertEqual(self.clock.sleeps[:2], [0.08, 0.08])

    def test_lines_after_signature_stay_buffered(self):
        """Test readings sent right after the signature are not lost"""
        factory = ScriptedPorts({"COM1": {"chunks": [b"RADAR_READY\n30\n"]}})

        conn = self._detect(["COM1"], factory)

        self.assertEqual(conn.readline(), b"30\n")

    def test_dtr_failure_moves_to_next_port(self):
        """Test a port rejecting DTR is closed and the scan continues"""
        factory = ScriptedPorts({
            "COM1": {"fail_dtr": True},
            "COM2": {"chunks": [b"RADAR_READY\n"]},
        })

        conn = self._detect(["COM1", "COM2"], factory)

        self.assertEqual(conn.port_name, "COM2")
        self.assertFalse(factory.created[0].is_open())
        self.assertGreaterEqual(factory.created[0].close_count, 1)

    def test_dtr_failure_on_real_connection(self):
        """Test a pyserial DTR error on one port does not abort detection"""
        ports = {}

        def make_port(name):
            port = MagicMock()
            port.is_open = True
            port.in_waiting = 0
            if name == "COM1":
                def dtr(*value):
                    # Assigning before open() is accepted, as in pyserial
                    if value and port.open.called:
                        raise serial.SerialException("DTR failed")
                type(port).dtr = PropertyMock(side_effect=dtr)
            else:
                reply = [b"RADAR_READY\n"]

                def read(size):
                    return reply.pop(0) if reply else b""

                port.read.side_effect = read
                type(port).in_waiting = PropertyMock(
                    side_effect=lambda: len(reply[0]) if reply else 0)
            ports[name] = port
            return port

        created = iter(["COM1", "COM2"])
        with patch("serial.Serial", side_effect=lambda: make_port(next(created))):
            conn = self._detect(["COM1", "COM2"], SerialConnection)

        self.assertEqual(conn.port_name, "COM2")
        self.assertTrue(conn.is_open())
        ports["COM1"].close.assert_called_once()


class TestWaitForSignature(unittest.TestCase):
    """Test the signature wait window"""

    def test_timeout(self):
        """Test HandshakeTimeout after the window elapses"""
        clock = FakeClock()
        conn = FakeConnection("COM5", chunks=[b"1\n", b"2\n"])
        conn.open()

        with self.assertRaises(HandshakeTimeout) as ctx:
            wait_for_signature(conn, "RADAR_READY", timeout=2.5,
                               poll_interval=0.01, clock=clock, sleep=clock.sleep)

        self.assertEqual(ctx.exception.port_name, "COM5")
        self.assertGreaterEqual(clock.t, 2.5)
        self.assertLess(clock.t, 2.6)

    def test_signature_found_late_in_window(self):
        """Test a signature arriving after a few empty polls"""
        clock = FakeClock()
        conn = FakeConnection("COM5", chunks=[b"", b"", b"", b"RADAR", b"_READY\n"])
        conn.open()

        wait_for_signature(conn, "RADAR_READY", timeout=2.5,
                           clock=clock, sleep=clock.sleep)

        self.assertLess(clock.t, 2.5)

    def test_reset_board_order(self):
        """Test reset_board pulses DTR low then high"""
        clock = FakeClock()
        conn = FakeConnection("COM5")
        conn.open()

        reset_board(conn, settle=0.05, sleep=clock.sleep)

        self.assertEqual(conn.dtr_history, [False, True])
        self.assertEqual(clock.sleeps, [0.05, 0.05])


class TestOpenManual(unittest.TestCase):
    """Test the manual override path"""

    def test_opens_without_handshake(self):
        """Test manual open does not touch DTR or wait for the signature"""
        factory = ScriptedPorts({})

        conn = open_manual("COM7", 9600, connection_factory=factory)

        self.assertTrue(conn.is_open())
        self.assertEqual(conn.dtr_history, [])
        self.assertEqual(conn.flush_count, 0)

    def test_open_failure_raises(self):
        """Test EndpointOpenFailed propagates in manual mode"""
        factory = ScriptedPorts({"COM7": {"fail_open": True}})

        with self.assertRaises(EndpointOpenFailed):
            open_manual("COM7", 9600, connection_factory=factory)


class TestCandidatePorts(unittest.TestCase):
    """Test port enumeration order"""

    def test_natural_sort(self):
        """Test numbered ports sort numerically"""
        ports = [SimpleNamespace(device=name)
                 for name in ["COM10", "COM2", "COM1", "COM3"]]

        with patch("serial.tools.list_ports.comports", return_value=ports):
            self.assertEqual(candidate_ports(), ["COM1", "COM2", "COM3", "COM10"])

    def test_unix_devices(self):
        """Test Unix device names"""
        ports = [SimpleNamespace(device=name)
                 for name in ["/dev/ttyUSB0", "/dev/ttyACM10", "/dev/ttyACM2"]]

        with patch("serial.tools.list_ports.comports", return_value=ports):
            self.assertEqual(candidate_ports(),
                             ["/dev/ttyACM2", "/dev/ttyACM10", "/dev/ttyUSB0"])


if __name__ == '__main__':
    unittest.main()
