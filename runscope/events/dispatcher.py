# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Runscope Contributors
#
# This file is part of Runscope.
#
# Runscope is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Runscope is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import logging
from typing import Protocol

from runscope.configuration.types import Configuration
from runscope.events.types import ConfigurationCombined, Event
from runscope.telemetry.system import TelemetrySystem

logger = logging.getLogger(__name__)


class DispatcherSealedError(Exception):
    """Raised when a subscriber is registered after the dispatcher was sealed."""

    pass


class Subscriber(Protocol):
    """
    Receives every dispatched event.
    """

    def notify(self, event: Event) -> None:
        raise NotImplementedError()


class LoggingSubscriber:
    """
    Writes the textual rendering of each event to a logger.
    """

    def __init__(self, log: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._log = log if log is not None else logger
        self._level = level

    def notify(self, event: Event) -> None:
        self._log.log(self._level, "%s", event.as_string())


class EventDispatcher:
    """
    Delivers events to subscribers, in registration order.

    Typical lifecycle:
      dispatcher = EventDispatcher()
      dispatcher.register(LoggingSubscriber())
      dispatcher.seal()
      dispatcher.dispatch(event)
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []
        self._sealed: bool = False

    def register(self, subscriber: Subscriber) -> None:
        if self._sealed:
            raise DispatcherSealedError("Subscribers cannot be registered after the dispatcher was sealed.")
        self._subscribers.append(subscriber)

    def seal(self) -> None:
        self._sealed = True

    def is_sealed(self) -> bool:
        return self._sealed

    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def dispatch(self, event: Event) -> None:
        """
        A failing subscriber is logged and skipped; the others still get the event.
        """
        for subscriber in self._subscribers:
            try:
                subscriber.notify(event)
            except Exception:
                logger.warning(
                    "Subscriber %s failed to handle %s",
                    type(subscriber).__name__,
                    type(event).__name__,
                    exc_info=True,
                )


def combine_configuration(
    configuration: Configuration,
    telemetry: TelemetrySystem,
    dispatcher: EventDispatcher,
) -> ConfigurationCombined:
    """
    Announce that configuration assembly has finished.
    """
    event = ConfigurationCombined(telemetry_info=telemetry.snapshot(), configuration=configuration)
    logger.debug("Configuration combined (baseline in use: %s)", configuration.source.use_baseline())
    dispatcher.dispatch(event)
    return event
