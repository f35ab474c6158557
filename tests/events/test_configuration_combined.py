import logging
from dataclasses import FrozenInstanceError, dataclass
from pathlib import Path

import pytest
from runscope.configuration.source import Source
from runscope.configuration.types import Configuration
from runscope.events.dispatcher import (
    DispatcherSealedError,
    EventDispatcher,
    LoggingSubscriber,
    combine_configuration,
)
from runscope.events.types import ConfigurationCombined, Event
from runscope.telemetry.system import TelemetrySystem

# ----------------------------
# Fakes
# ----------------------------


@dataclass(frozen=True, slots=True)
class FakeInfo:
    text: str

    def as_string(self) -> str:
        return self.text


class RecordingSubscriber:
    def __init__(self, name: str, seen: list[tuple[str, object]]) -> None:
        self.name = name
        self.seen = seen

    def notify(self, event: Event) -> None:
        self.seen.append((self.name, event))


class FailingSubscriber:
    def notify(self, event: Event) -> None:
        raise RuntimeError("boom")


def make_configuration() -> Configuration:
    return Configuration(source=Source(baseline_file="qa/baseline.xml"), configuration_file=Path("runscope.yaml"))


# ----------------------------
# ConfigurationCombined
# ----------------------------


def test_as_string_prefixes_telemetry():
    event = ConfigurationCombined(telemetry_info=FakeInfo("00:00:01"), configuration=make_configuration())

    assert event.as_string() == "00:00:01 Test Runner Configuration Combined"
    assert str(event) == event.as_string()


def test_accessors_return_stored_references():
    info = FakeInfo("t")
    configuration = make_configuration()
    event = ConfigurationCombined(telemetry_info=info, configuration=configuration)

    assert event.telemetry_info is info
    assert event.configuration is configuration
    assert event.configuration.source.use_baseline() is True
    assert isinstance(event, Event)


def test_event_is_frozen():
    event = ConfigurationCombined(telemetry_info=FakeInfo("t"), configuration=make_configuration())

    with pytest.raises(FrozenInstanceError):
        event.configuration = make_configuration()  # type: ignore[misc]


def test_configuration_defaults():
    c = Configuration(source=Source())

    assert c.has_configuration_file() is False
    assert c.output_format == "text"
    assert c.deterministic is True
    assert c.tool_version
    assert make_configuration().has_configuration_file() is True


# ----------------------------
# Dispatcher
# ----------------------------


def test_dispatch_in_registration_order():
    seen: list[tuple[str, object]] = []
    d = EventDispatcher()
    d.register(RecordingSubscriber("a", seen))
    d.register(RecordingSubscriber("b", seen))

    event = ConfigurationCombined(telemetry_info=FakeInfo("t"), configuration=make_configuration())
    d.dispatch(event)

    assert [name for name, _ in seen] == ["a", "b"]
    assert all(e is event for _, e in seen)


def test_failing_subscriber_does_not_stop_delivery(caplog: pytest.LogCaptureFixture):
    seen: list[tuple[str, object]] = []
    d = EventDispatcher()
    d.register(FailingSubscriber())
    d.register(RecordingSubscriber("after", seen))

    with caplog.at_level(logging.WARNING, logger="runscope.events.dispatcher"):
        d.dispatch(ConfigurationCombined(telemetry_info=FakeInfo("t"), configuration=make_configuration()))

    assert [name for name, _ in seen] == ["after"]
    assert "FailingSubscriber" in caplog.text


def test_sealed_dispatcher_rejects_registration():
    d = EventDispatcher()
    d.seal()

    assert d.is_sealed()
    with pytest.raises(DispatcherSealedError):
        d.register(LoggingSubscriber())
    assert d.subscribers() == ()


def test_logging_subscriber_writes_rendering(caplog: pytest.LogCaptureFixture):
    log = logging.getLogger("runscope.test.audit")
    event = ConfigurationCombined(telemetry_info=FakeInfo("00:00:01"), configuration=make_configuration())

    with caplog.at_level(logging.INFO, logger="runscope.test.audit"):
        LoggingSubscriber(log).notify(event)

    assert "00:00:01 Test Runner Configuration Combined" in caplog.messages


def test_combine_configuration_dispatches_once():
    seen: list[tuple[str, object]] = []
    d = EventDispatcher()
    d.register(RecordingSubscriber("a", seen))
    configuration = make_configuration()
    ticks = iter([0.0, 1.0])
    telemetry = TelemetrySystem(clock=lambda: next(ticks), memory_meter=lambda: (0, 0))

    event = combine_configuration(configuration, telemetry, d)

    assert seen == [("a", event)]
    assert event.configuration is configuration
    assert event.as_string() == "[00:00:01.000000 / 00:00:01.000000] [0 bytes] Test Runner Configuration Combined"
