import pytest

from microkit.ht16k33 import CHARMAP, HT16K33


class FakeBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


def payloads(bus):
    return [data for _, data in bus.writes]


def test_begin_sequence():
    bus = FakeBus()
    HT16K33(bus).begin()
    assert payloads(bus) == [
        bytes([0x21]), bytes([0x81]), bytes([0xE8]),
        bytes([0, 0x00]), bytes([2, 0x00]), bytes([6, 0x00]), bytes([8, 0x00]),
        bytes([4, 0x00]),
    ]
    assert all(address == 0x70 for address, _ in bus.writes)


def test_display_int():
    bus = FakeBus()
    HT16K33(bus, 0x71).display_int(1234)
    assert payloads(bus) == [
        bytes([0, 0x06]), bytes([2, 0x5B]), bytes([6, 0x4F]), bytes([8, 0x66]),
    ]


def test_cache_suppresses_repeats():
    bus = FakeBus()
    display = HT16K33(bus)
    display.display_int(42)
    count = len(bus.writes)
    display.display_int(42)
    assert len(bus.writes) == count


def test_display_hex():
    bus = FakeBus()
    HT16K33(bus).display_hex(0xABCD)
    assert [data[1] for data in payloads(bus)] == [CHARMAP[10], CHARMAP[11], CHARMAP[12], CHARMAP[13]]


def test_brightness_and_blink():
    bus = FakeBus()
    display = HT16K33(bus)
    display.brightness(20)
    display.blink(2)
    display.blink(5)
    assert payloads(bus) == [bytes([0xEF]), bytes([0x85]), bytes([0x81])]


def test_display_float_point():
    bus = FakeBus()
    HT16K33(bus).display_float(1.5)
    assert payloads(bus) == [
        bytes([0, CHARMAP[1] | 0x80]), bytes([2, CHARMAP[5]]),
        bytes([6, CHARMAP[0]]), bytes([8, CHARMAP[0]]),
    ]


def test_display_float_out_of_range_ignored():
    bus = FakeBus()
    HT16K33(bus).display_float(-1.0)
    assert bus.writes == []


def test_display_time_and_colon():
    bus = FakeBus()
    display = HT16K33(bus)
    display.display_colon(True)
    display.display_time(12, 34)
    assert payloads(bus)[0] == bytes([4, 2])
    assert payloads(bus)[-1] == bytes([4, 0])


def test_display_requires_four_digits():
    with pytest.raises(ValueError):
        HT16K33(FakeBus()).display([1, 2, 3])


def test_display_int_range():
    with pytest.raises(ValueError):
        HT16K33(FakeBus()).display_int(10000)


def test_display_test_ends_all_lit():
    bus = FakeBus()
    HT16K33(bus).display_test(0)
    assert payloads(bus)[-5:] == [bytes([pos * 2, 255]) for pos in range(5)]
    assert len(bus.writes) == 5 * 256