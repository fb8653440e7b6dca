"""Multi-subscriber notification channel.

Handlers subscribe to a channel and are called synchronously, in
subscription order, for every event emitted after they subscribed. There is
no replay of earlier events.
"""

from threading import Lock
from typing import Any, Callable, List

from localekit.events.models import TranslationChangeEvent
from localekit.logging import get_module_logger

logger = get_module_logger()

Handler = Callable[[TranslationChangeEvent], Any]


class Subscription:
    """Handle returned by EventChannel.subscribe()."""

    def __init__(self, channel: "EventChannel", handler: Handler):
        self._channel = channel
        self.handler = handler
        self.active = True

    def unsubscribe(self) -> None:
        """Stop receiving events. Idempotent."""
        if self.active:
            self._channel._remove(self)
            self.active = False

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unsubscribe()


class EventChannel:
    """Broadcast channel for TranslationChangeEvent.

    Handlers run on the emitting thread. If a handler raises, the error is
    logged and delivery continues with the remaining handlers.

    Attributes:
        name: Event type stamped on every emitted event.
    """

    def __init__(self, name: str):
        self.name = name
        self._subscriptions: List[Subscription] = []
        self._lock = Lock()

    def subscribe(self, handler: Handler) -> Subscription:
        """Register a handler for future events.

        Args:
            handler: Callable receiving a TranslationChangeEvent.

        Returns:
            Subscription that can be used to unsubscribe.
        """
        subscription = Subscription(self, handler)
        with self._lock:
            self._subscriptions.append(subscription)
            count = len(self._subscriptions)
        logger.debug(
            "subscribed_to_channel",
            channel=self.name,
            handler=getattr(handler, "__name__", "unknown"),
            total_handlers=count,
        )
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    def emit(self, event: TranslationChangeEvent) -> List[Any]:
        """Deliver an event to every current subscriber.

        Args:
            event: The event to deliver. Its event_type is set to the
                channel name.

        Returns:
            List of return values from the handlers that succeeded.
        """
        event.event_type = self.name
        with self._lock:
            subscriptions = list(self._subscriptions)

        logger.debug(
            "emitting_event",
            channel=self.name,
            lang=event.lang,
            handler_count=len(subscriptions),
            correlation_id=str(event.correlation_id),
        )

        results = []
        for subscription in subscriptions:
            try:
                results.append(subscription.handler(event))
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    channel=self.name,
                    handler=getattr(subscription.handler, "__name__", "unknown"),
                    lang=event.lang,
                    error=str(e),
                    correlation_id=str(event.correlation_id),
                )
        return results

    @property
    def subscriber_count(self) -> int:
        """Number of active subscriptions."""
        with self._lock:
            return len(self._subscriptions)

    def clear(self) -> None:
        """Remove all subscriptions.

        WARNING: This is intended for testing only.
        """
        with self._lock:
            for subscription in self._subscriptions:
                subscription.active = False
            self._subscriptions.clear()
