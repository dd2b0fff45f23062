from microkit.countdown import CountDown, Resolution


class FakeClock:
    def __init__(self, now=10.0):
        self.now = now

    def __call__(self):
        return self.now


def test_initial_state():
    cd = CountDown(clock=FakeClock())
    assert cd.resolution is Resolution.MILLIS
    assert cd.is_running is False
    assert cd.remaining() == 0


def test_counts_down_in_millis():
    clock = FakeClock()
    cd = CountDown(clock=clock)
    cd.start(1000)
    assert cd.is_running
    clock.now += 0.25
    assert cd.remaining() == 1000 - 250


def test_expiry_stops():
    clock = FakeClock()
    cd = CountDown(clock=clock)
    cd.start(500)
    clock.now += 2.0
    assert cd.remaining() == 0
    assert cd.is_running is False


def test_stop_and_continue_keeps_remaining():
    clock = FakeClock()
    cd = CountDown(clock=clock)
    cd.start(1000)
    clock.now += 0.25
    cd.stop()
    left = cd.remaining()
    clock.now += 5.0
    assert cd.remaining() == left
    cd.cont()
    assert cd.is_running
    assert cd.remaining() == left
    clock.now += 0.5
    assert cd.remaining() == left - 500


def test_cont_ignored_while_running():
    clock = FakeClock()
    cd = CountDown(clock=clock)
    cd.start(1000)
    clock.now += 0.5
    cd.cont()
    assert cd.remaining() == 1000 - 500


def test_start_time_uses_seconds():
    clock = FakeClock()
    cd = CountDown(clock=clock)
    cd.start_time(0, 0, 1, 30)
    assert cd.resolution is Resolution.SECONDS
    assert cd.remaining() == 90
    clock.now += 30
    assert cd.remaining() == 90 - 30


def test_start_time_is_capped():
    cd = CountDown(clock=FakeClock())
    cd.start_time(255, 0, 0, 0)
    assert cd.remaining() == 4294967


def test_micros_resolution():
    clock = FakeClock()
    cd = CountDown(Resolution.MICROS, clock=clock)
    cd.start(1_000_000)
    clock.now += 0.5
    assert cd.remaining() == 1_000_000 - 500_000


def test_set_resolution_discards_ticks():
    clock = FakeClock()
    cd = CountDown(clock=clock)
    cd.start(1000)
    cd.set_resolution(Resolution.MILLIS)
    assert cd.remaining() == 0
    assert cd.is_running is False


def test_zero_ticks_finishes_immediately():
    cd = CountDown(clock=FakeClock())
    cd.start(0)
    assert cd.remaining() == 0
    assert cd.is_running is False