"""Translation notification channels.

Usage:

    from localekit.events import EventChannel, TranslationChangeEvent

    channel = EventChannel("lang.changed")
    subscription = channel.subscribe(lambda event: print(event.lang))
    channel.emit(TranslationChangeEvent(lang="el", translations=table))
    subscription.unsubscribe()
"""

from localekit.events.channel import EventChannel, Subscription
from localekit.events.models import (
    DEFAULT_LANG_CHANGED,
    LANG_CHANGED,
    TRANSLATION_CHANGED,
    TranslationChangeEvent,
)

__all__ = [
    "EventChannel",
    "Subscription",
    "TranslationChangeEvent",
    "TRANSLATION_CHANGED",
    "LANG_CHANGED",
    "DEFAULT_LANG_CHANGED",
]
