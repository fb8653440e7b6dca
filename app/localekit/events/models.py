"""Event models for translation notifications.

Defines the change event carried by the store's notification channels.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from localekit.i18n.models import Translations

TRANSLATION_CHANGED = "translation.changed"
LANG_CHANGED = "lang.changed"
DEFAULT_LANG_CHANGED = "lang.default.changed"


@dataclass
class TranslationChangeEvent:
    """Record of a change to the translations or languages of a store.

    Carries the language the change concerns and that language's table as
    held by the store at the time of the change (a live reference, not a
    snapshot).
    """

    lang: str
    """Language tag the change concerns."""

    translations: "Translations"
    """The language's table."""

    event_type: str = TRANSLATION_CHANGED
    """Channel the event was emitted on (e.g. 'lang.changed')."""

    timestamp: datetime = field(default_factory=datetime.now)
    """When the change happened."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track the event across log entries."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary.

        Returns:
            Dictionary with ISO format timestamp, UUID as string and a
            plain dict copy of the table.
        """
        return {
            "event_type": self.event_type,
            "lang": self.lang,
            "translations": dict(self.translations),
            "timestamp": self.timestamp.isoformat(),
            "correlation_id": str(self.correlation_id),
        }
