"""Registry of buttons that belong to a button group."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from component_docs.button import Button

logger = logging.getLogger(__name__)


class ButtonGroup:
    """A group that its member buttons register with on creation.

    Registration changes and iteration over the members are serialized by
    a lock, so buttons may attach and detach from any thread.
    """

    def __init__(self, *, full_width: bool = False) -> None:
        self.full_width = full_width
        self._buttons: list[Button] = []
        self._lock = threading.Lock()

    def add_button(self, button: Button) -> None:
        """Register a member button. Registering twice is a no-op."""
        with self._lock:
            if button not in self._buttons:
                self._buttons.append(button)
                logger.debug("Button registered (%d members)", len(self._buttons))

    def remove_button(self, button: Button) -> None:
        """Unregister a member button if present."""
        with self._lock:
            if button in self._buttons:
                self._buttons.remove(button)
                logger.debug("Button removed (%d members)", len(self._buttons))

    @property
    def buttons(self) -> tuple[Button, ...]:
        """Snapshot of the currently registered buttons, in registration order."""
        with self._lock:
            return tuple(self._buttons)

    def none_button_is_stretched(self) -> bool:
        """Return True when no member button sets its own full width flag."""
        with self._lock:
            return not any(b.style.full_width for b in self._buttons)
