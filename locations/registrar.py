"""Run-scoped registry that keeps fallback repository names unique."""
from __future__ import annotations

import logging
import threading
from typing import Dict

logger = logging.getLogger(__name__)


class NameRegistrar:
    """Hands out unique names by suffixing repeated base names with a counter.

    The first registration of a base name returns it unchanged. Every later
    registration bumps the stored counter and returns ``<base>_<counter>``,
    so ``widgets`` registered three times yields ``widgets``, ``widgets_1``
    and ``widgets_2``.

    One instance is meant to live for a whole run and be passed to every
    resolution call. Entries are never removed.
    """

    def __init__(self) -> None:
        self._counters: Dict[str, int] = {}
        self._lock = threading.Lock()

    def register(self, base_name: str) -> str:
        """Register ``base_name`` and return the unique name to use for it.

        Args:
            base_name: Name candidate before any collision suffix

        Returns:
            ``base_name`` on first use, otherwise ``base_name`` suffixed with
            ``_`` and the incremented counter
        """
        with self._lock:
            if base_name not in self._counters:
                self._counters[base_name] = 0
                return base_name

            self._counters[base_name] += 1
            unique_name = f"{base_name}_{self._counters[base_name]}"

        logger.debug(f"Name {base_name} already taken, using {unique_name}")
        return unique_name
