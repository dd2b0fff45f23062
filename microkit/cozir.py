"""COZIR CO2, temperature and humidity sensor on a serial line, in polling mode."""

from __future__ import annotations

import time
from enum import IntEnum, IntFlag
from typing import Protocol

DEFAULT_SETTLE = 1.2
RESPONSE_DELAY = 0.2


class SerialPort(Protocol):
    in_waiting: int

    def write(self, data: bytes) -> object: ...

    def read(self, size: int) -> bytes: ...


class OutputField(IntFlag):
    """Fields reported in streaming mode; combine with |."""

    NONE = 0x0001
    RAWCO2 = 0x0002
    FILTCO2 = 0x0004
    SENSTEMP = 0x0008
    RAWLEDSIGNAL = 0x0010
    FILTLEDSIGNAL = 0x0020
    FILTTEMP = 0x0040
    RAWTEMP = 0x0080
    ZEROPOINT = 0x0100
    MAXLED = 0x0200
    RAWLED = 0x0400
    FILTLED = 0x0800
    HUMIDITY = 0x1000
    LIGHT = 0x2000
    HTC = HUMIDITY | RAWTEMP | RAWCO2
    ALL = 0x3FFE


class OperatingMode(IntEnum):
    COMMAND = 0x00
    STREAMING = 0x01
    POLLING = 0x02


def _atoi(text: str) -> int:
    """Leading integer of text, as C atoi reads it; 0 if there is none."""
    text = text.lstrip(" \t\n\r\f\v")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _disabled_calibration(value: int) -> int:
    """Check a 16-bit calibration value for a command kept switched off.

    The command is never sent to the sensor; the result is always 0.
    """
    if not 0 <= int(value) <= 0xFFFF:
        raise ValueError(f"calibration value out of range 0..65535: {value}")
    return 0


class Cozir:
    """Talks to a COZIR sensor; switches it to polling mode on creation."""

    def __init__(self, port: SerialPort, settle: float = DEFAULT_SETTLE):
        self._port = port
        self.response_delay = RESPONSE_DELAY
        self.set_operating_mode(OperatingMode.POLLING)
        if settle > 0:
            time.sleep(settle)

    def _command(self, text: str) -> None:
        self._port.write(text.encode("ascii") + b"\r\n")

    def _request(self, text: str) -> int:
        self._command(text)
        if self.response_delay > 0:
            time.sleep(self.response_delay)
        chunks = []
        while self._port.in_waiting:
            chunks.append(bytes(self._port.read(self._port.in_waiting)))
        answer = b"".join(chunks).decode("ascii", errors="replace")
        if answer[:1] == "T":
            rv = _atoi(answer[5:])
            if answer[4:5] == "\x01":
                rv += 1000
        else:
            rv = _atoi(answer[2:])
        return rv & 0xFFFFFFFF

    def set_operating_mode(self, mode: OperatingMode) -> None:
        self._command(f"K {int(mode)}")

    def celsius(self) -> float:
        rv = self._request("T") & 0xFFFF
        return 0.1 * (rv - 1000.0)

    def fahrenheit(self) -> float:
        return self.celsius() * 1.8 + 32

    def humidity(self) -> float:
        return 0.1 * self._request("H")

    def light(self) -> float:
        return 1.0 * self._request("L")

    def co2(self) -> int:
        return self._request("Z")

    def fine_tune_zero_point(self, reading: int, reported: int) -> int:
        """Make a reading of `reading` be reported as `reported`."""
        return self._request(f"F {reading} {reported}") & 0xFFFF

    def calibrate_fresh_air(self) -> int:
        return self._request("G") & 0xFFFF

    def calibrate_nitrogen(self) -> int:
        return self._request("U") & 0xFFFF

    def calibrate_known_gas(self, value: int) -> int:
        return self._request(f"X {value}") & 0xFFFF

    def calibrate_manual(self, value: int) -> int:
        """Not recommended by the datasheet; never sent, returns 0."""
        return _disabled_calibration(value)

    def set_span_calibrate(self, value: int) -> int:
        """Not recommended by the datasheet; never sent, returns 0."""
        return _disabled_calibration(value)

    def span_calibrate(self) -> int:
        return self._request("s") & 0xFFFF

    def set_digi_filter(self, value: int) -> None:
        """1 is fast and noisy, 255 slow and smooth; 32 is the default."""
        self._command(f"A {value}")

    def digi_filter(self) -> int:
        return self._request("a") & 0xFF

    def set_output_fields(self, fields: OutputField) -> None:
        self._command(f"M {int(fields)}")

    def request_recent_fields(self) -> None:
        """Ask for the latest fields; the answer must be read from the port."""
        self._command("Q")

    def set_eeprom(self, address: int, value: int) -> None:
        self._command(f"P {address} {value}")

    def eeprom(self, address: int) -> int:
        return self._request(f"p {address}") & 0xFF

    def request_version(self) -> None:
        """Ask for version and serial; the answer must be read from the port."""
        self._command("Y")

    def request_configuration(self) -> None:
        """Ask for the configuration; the answer must be read from the port."""
        self._command("*")