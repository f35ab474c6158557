from datetime import datetime, timedelta, timezone

from runscope.telemetry.system import TelemetrySystem, tracemalloc_meter
from runscope.telemetry.types import Info, TelemetryInfo, format_duration

# ----------------------------
# Helpers
# ----------------------------

T0 = datetime(2026, 1, 15, 12, 30, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, *ticks: float) -> None:
        self._ticks = list(ticks)

    def __call__(self) -> float:
        return self._ticks.pop(0)


# ----------------------------
# Tests
# ----------------------------


def test_format_duration():
    assert format_duration(timedelta(0)) == "00:00:00.000000"
    assert format_duration(timedelta(seconds=1)) == "00:00:01.000000"
    assert format_duration(timedelta(hours=2, minutes=3, seconds=4, microseconds=5)) == "02:03:04.000005"
    assert format_duration(timedelta(seconds=-3)) == "00:00:00.000000"


def test_info_as_string():
    info = Info(
        time=T0,
        duration_since_start=timedelta(seconds=1, microseconds=250000),
        duration_since_previous=timedelta(microseconds=1500),
        memory_usage=4096,
        peak_memory_usage=8192,
    )

    assert info.as_string() == "[00:00:01.250000 / 00:00:00.001500] [4096 bytes]"
    assert str(info) == info.as_string()
    assert isinstance(info, TelemetryInfo)


def test_system_snapshot_durations():
    system = TelemetrySystem(
        clock=FakeClock(10.0, 11.5, 12.0),
        memory_meter=lambda: (100, 200),
        now=lambda: T0,
    )

    first = system.snapshot()
    second = system.snapshot()

    assert first.duration_since_start == timedelta(seconds=1.5)
    assert first.duration_since_previous == timedelta(seconds=1.5)
    assert second.duration_since_start == timedelta(seconds=2)
    assert second.duration_since_previous == timedelta(seconds=0.5)
    assert second.memory_usage == 100
    assert second.peak_memory_usage == 200
    assert second.time == T0


def test_tracemalloc_meter_when_not_tracing():
    current, peak = tracemalloc_meter()
    assert current >= 0 and peak >= 0
