"""HT16K33 driven four-digit seven-segment display with a colon."""

from __future__ import annotations

import math
import time
from typing import Optional, Protocol, Sequence

DEFAULT_ADDRESS = 0x70

_ON = 0x21
_STANDBY = 0x20
_DISPLAY_ON = 0x81
_DISPLAY_OFF = 0x80
_BLINK_OFF = 0x81
_BRIGHTNESS = 0xE0

SPACE = 16

# Segment patterns for 0-9, A-F and a blank.
CHARMAP = (
    0x3F, 0x06, 0x5B, 0x4F, 0x66, 0x6D, 0x7D, 0x07,
    0x7F, 0x6F, 0x77, 0x7C, 0x39, 0x5E, 0x79, 0x71,
    0x00,
)

# Display RAM positions of the four digits; position 2 is the colon.
_DIGIT_POSITIONS = (0, 1, 3, 4)
_COLON_POSITION = 2


class I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...


def _split4(n: int) -> list[int]:
    h, l = divmod(n, 100)
    return [*divmod(h, 10), *divmod(l, 10)]


class HT16K33:
    """A 4-digit display; unchanged positions are not re-sent."""

    def __init__(self, bus: I2CBus, address: int = DEFAULT_ADDRESS):
        self._bus = bus
        self._addr = address
        self._cache: list[Optional[int]] = [None] * 5

    def begin(self) -> None:
        self.display_on()
        self.display_clear()

    def _write_cmd(self, cmd: int) -> None:
        self._bus.write(self._addr, bytes([cmd]))

    def _write_pos(self, pos: int, mask: int) -> None:
        if self._cache[pos] == mask:
            return
        self._bus.write(self._addr, bytes([pos * 2, mask]))
        self._cache[pos] = mask

    def display_on(self) -> None:
        self._write_cmd(_ON)
        self._write_cmd(_DISPLAY_ON)
        self.brightness(8)

    def display_off(self) -> None:
        self._write_cmd(_DISPLAY_OFF)
        self._write_cmd(_STANDBY)

    def brightness(self, value: int) -> None:
        """Set brightness 0..15; larger values are capped."""
        self._write_cmd(_BRIGHTNESS | min(value, 0x0F))

    def blink(self, value: int) -> None:
        """Set blink rate 0 (off) .. 3; other values switch blinking off."""
        if not 0 <= value <= 0x03:
            value = 0
        self._write_cmd(_BLINK_OFF | (value << 1))

    def display_clear(self) -> None:
        self.display([SPACE] * 4)
        self.display_colon(False)

    def display_int(self, n: int) -> None:
        """Show 0000..9999."""
        if not 0 <= n <= 9999:
            raise ValueError("value must be 0..9999")
        self.display(_split4(n))

    def display_hex(self, n: int) -> None:
        """Show 0000..FFFF."""
        if not 0 <= n <= 0xFFFF:
            raise ValueError("value must be 0..0xFFFF")
        self.display([(n >> shift) & 0x0F for shift in (12, 8, 4, 0)])

    def display_time(self, left: int, right: int) -> None:
        """Show two two-digit numbers, 00:00 .. 99:99."""
        if not (0 <= left <= 99 and 0 <= right <= 99):
            raise ValueError("time fields must be 0..99")
        self.display([*divmod(left, 10), *divmod(right, 10)])
        self.display_colon(False)

    def display_float(self, value: float) -> None:
        """Show 0.000 .. 9999 with a decimal point; other values are ignored."""
        if value > 9999 or value < 0:
            return
        w = math.floor(value + 0.5)
        point = 0
        if w > 9:
            point = 1
        if w > 99:
            point = 2
        if w > 999:
            point = 3
        if value >= 1:
            while value < 1000:
                value *= 10
            w = math.floor(value + 0.5)
        else:
            w = math.floor(value * 1000 + 0.5)
        self.display(_split4(w), point)

    def display(self, digits: Sequence[int], point: Optional[int] = None) -> None:
        """Show four character indices (0-15 hex digits, 16 blank), with an optional point."""
        if len(digits) != 4:
            raise ValueError("exactly four digits are needed")
        for i, (pos, digit) in enumerate(zip(_DIGIT_POSITIONS, digits)):
            mask = CHARMAP[digit]
            if point == i:
                mask |= 0x80
            self._write_pos(pos, mask)

    def display_colon(self, on: bool) -> None:
        self._write_pos(_COLON_POSITION, 2 if on else 0)

    def display_test(self, pause: float) -> None:
        """Step every position through all 256 patterns, pausing pause ms between."""
        for pattern in range(256):
            for pos in range(5):
                self._write_pos(pos, pattern)
            time.sleep(pause / 1000)