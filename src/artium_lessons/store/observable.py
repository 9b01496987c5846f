"""
Observable state holder.

A value with subscribers: setting a new value notifies every subscriber in
subscription order. Setting a value equal to the current one is a no-op.
"""

import logging
from typing import Callable, Generic, List, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar('T')

Subscriber = Callable[[T], None]


class ObservableState(Generic[T]):
    """
    Holds a value and publishes changes to subscribers.

    A subscriber that raises is logged and skipped; the remaining
    subscribers are still notified.

    Examples:
        >>> state = ObservableState(0, name="counter")
        >>> unsubscribe = state.subscribe(print)   # prints 0
        >>> state.set(1)                            # prints 1
        True
        >>> unsubscribe()
    """

    def __init__(self, initial: T, name: str = "state"):
        """
        Initialize with a starting value.

        Args:
            initial: Initial value
            name: Label used in log messages
        """
        self.name = name
        self._value = initial
        self._subscribers: List[Subscriber] = []

    @property
    def value(self) -> T:
        """Get current value."""
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def set(self, value: T) -> bool:
        """
        Replace the value and notify subscribers if it changed.

        Returns:
            True if subscribers were notified
        """
        if value == self._value:
            return False

        self._value = value
        for subscriber in list(self._subscribers):
            self._notify(subscriber, value)
        return True

    def subscribe(
        self,
        subscriber: Subscriber,
        emit_current: bool = True
    ) -> Callable[[], None]:
        """
        Register a subscriber.

        Args:
            subscriber: Called with each new value
            emit_current: Call the subscriber immediately with the current value

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(subscriber)
        if emit_current:
            self._notify(subscriber, self._value)

        def unsubscribe():
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def _notify(self, subscriber: Subscriber, value: T):
        try:
            subscriber(value)
        except Exception:
            logger.exception(f"Subscriber of {self.name} raised")
