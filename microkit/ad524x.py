"""AD5241/AD5242 I2C digital potentiometer."""

from __future__ import annotations

from typing import Optional, Protocol

DEFAULT_ADDRESS = 0x2C
MID_SCALE = 127

_RDAC0 = 0x00
_RDAC1 = 0x80
_RESET = 0x40
_O1_HIGH = 0x10
_O2_HIGH = 0x08


class I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, count: int) -> bytes: ...


class AD524XError(ValueError):
    """An invalid channel or value, or a missing read-back."""


class AD524X:
    """Controls the two wipers and two output lines of an AD524X."""

    def __init__(self, bus: I2CBus, address: int = DEFAULT_ADDRESS):
        self._bus = bus
        self._address = address
        self._last = [MID_SCALE, MID_SCALE]  # power-on reset puts wipers mid-scale
        self._o1 = False
        self._o2 = False

    @staticmethod
    def _check_rdac(rdac: int) -> None:
        if rdac not in (0, 1):
            raise AD524XError(f"rdac must be 0 or 1, not {rdac}")

    def _outputs(self) -> int:
        return (_O1_HIGH if self._o1 else 0) | (_O2_HIGH if self._o2 else 0)

    def _send(self, cmd: int, value: int) -> None:
        self._bus.write(self._address, bytes([cmd, value]))

    def zero_all(self) -> None:
        """Set both wipers to zero and both output lines low."""
        self.write(0, 0, False, False)
        self.write(1, 0)

    def write(self, rdac: int, value: int, o1: Optional[bool] = None, o2: Optional[bool] = None) -> None:
        """Set a wiper position 0..255, optionally setting the output lines too."""
        self._check_rdac(rdac)
        if not 0 <= value <= 0xFF:
            raise AD524XError(f"value must be 0..255, not {value}")
        if o1 is not None:
            self._o1 = bool(o1)
        if o2 is not None:
            self._o2 = bool(o2)
        cmd = (_RDAC1 if rdac == 1 else _RDAC0) | self._outputs()
        self._last[rdac] = value
        self._send(cmd, value)

    def set_o1(self, value: bool) -> None:
        self._o1 = bool(value)
        self._send(_RDAC0 | self._outputs(), self._last[0])

    def set_o2(self, value: bool) -> None:
        self._o2 = bool(value)
        self._send(_RDAC0 | self._outputs(), self._last[0])

    @property
    def o1(self) -> bool:
        return self._o1

    @property
    def o2(self) -> bool:
        return self._o2

    def read(self, rdac: int) -> int:
        """The last value written to a wiper."""
        self._check_rdac(rdac)
        return self._last[rdac]

    def read_back_register(self) -> int:
        """Read the register value last written to the device."""
        self._bus.write(self._address, b"")
        data = bytes(self._bus.read(self._address, 1))
        if not data:
            raise AD524XError("no data read back from device")
        return data[0]

    def mid_scale_reset(self, rdac: int) -> None:
        self._check_rdac(rdac)
        cmd = _RESET | (_RDAC1 if rdac == 1 else 0) | self._outputs()
        self._last[rdac] = MID_SCALE
        self._send(cmd, MID_SCALE)