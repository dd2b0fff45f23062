"""4x4 keypad read through a single analog input."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

DEFAULT_ADC_BITS = 10

# Upper limits (exclusive) of the 8-bit reading for keys 16 down to 1.
_THRESHOLDS = (
    (62, 16), (75, 15), (92, 14), (106, 13), (113, 12), (119, 11), (125, 10),
    (135, 9), (146, 8), (155, 7), (165, 6), (187, 5), (205, 4), (222, 3), (244, 2),
)


class KeyEvent(IntEnum):
    NOKEY = 0x00
    PRESSED = 0x80
    RELEASED = 0x40
    REPEATED = 0x20
    CHANGED = 0x10


def key_from_adc(value: int, bits: int = DEFAULT_ADC_BITS) -> int:
    """Translate a raw ADC reading into a key number 1..16, or 0 for no key."""
    shift = bits - 8
    val = value >> shift if shift >= 0 else value << -shift
    if val < 57:
        return 0
    for limit, key in _THRESHOLDS:
        if val < limit:
            return key
    return 1


class AnalogKeypad:
    """Reads keys from a callable returning raw ADC values."""

    def __init__(self, reader: Callable[[], int], bits: int = DEFAULT_ADC_BITS):
        self._reader = reader
        self._bits = bits
        self._last = 0

    def _raw(self) -> int:
        return key_from_adc(self._reader(), self._bits)

    @property
    def key(self) -> int:
        """The last key seen, 0 if none."""
        return self._last

    def event(self) -> KeyEvent:
        """Read the keypad and report how it changed since the last reading."""
        key = self._raw()
        last = self._last
        self._last = key
        if key == 0 and last == 0:
            return KeyEvent.NOKEY
        if last == 0:
            return KeyEvent.PRESSED
        if key == 0:
            return KeyEvent.RELEASED
        if key == last:
            return KeyEvent.REPEATED
        return KeyEvent.CHANGED

    def pressed(self) -> int:
        """Return the first key pressed, ignoring changes to another key while held."""
        key = self._raw()
        if key == 0 or self._last == 0:
            self._last = key
        return self._last

    def read(self) -> int:
        """Return the key pressed now, 0 if none."""
        self._last = self._raw()
        return self._last