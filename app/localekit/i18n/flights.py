"""In-flight load registry.

Maps a language tag to the single Future shared by every caller waiting on
that language's load. The registry is not locked itself: TranslateService
guards every access with its own lock so that the check-then-insert and the
settlement cleanup are serialized with the store writes they belong to.
"""

from concurrent.futures import Future
from typing import Callable, Dict, Iterator, Optional, Tuple


class LoadFlights:
    """Keyed map of language tag to pending load Future."""

    def __init__(self):
        self._flights: Dict[str, Future] = {}

    def get(self, lang: str) -> Optional[Future]:
        """Return the pending load for a language, if any."""
        return self._flights.get(lang)

    def get_or_start(self, lang: str, start: Callable[[], Future]) -> Tuple[Future, bool]:
        """Return the pending load for a language, starting one if absent.

        Args:
            lang: Language tag.
            start: Called once, only when no load is pending, to create it.

        Returns:
            (future, started) where started is True when ``start`` ran.
        """
        pending = self._flights.get(lang)
        if pending is not None:
            return pending, False
        pending = self._flights[lang] = start()
        return pending, True

    def discard(self, lang: str, pending: Optional[Future] = None) -> bool:
        """Forget the pending load for a language.

        Args:
            lang: Language tag.
            pending: When given, only forget the entry if it is this Future,
                so a superseded load cannot remove its successor.

        Returns:
            True if an entry was removed.
        """
        current = self._flights.get(lang)
        if current is None or (pending is not None and current is not pending):
            return False
        del self._flights[lang]
        return True

    def __contains__(self, lang: str) -> bool:
        return lang in self._flights

    def __len__(self) -> int:
        return len(self._flights)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._flights))
