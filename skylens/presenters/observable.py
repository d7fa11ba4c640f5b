"""Minimal change-notification mixin for presenters."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Observable:
    def __init__(self) -> None:
        self._observers: list[Callable[[Any], None]] = []

    def subscribe(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        """Register a callback invoked with the presenter after every change.

        Returns a function that removes the subscription.
        """
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._observers):
            callback(self)
