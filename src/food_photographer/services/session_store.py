"""In-memory holder for the current session."""

import threading
from dataclasses import dataclass, field
from uuid import UUID

from food_photographer.domain.errors import EditConflictError
from food_photographer.domain.images import Session, TrackedImage


@dataclass
class SessionStore:
    """Owns the only mutable reference to the displayed session.

    Every update swaps the whole ``Session`` value under a lock, so readers
    observe either the previous or the next session, never a mix.
    """

    _session: Session = field(default_factory=Session.empty)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def current(self) -> Session:
        return self._session

    def reset(self, session: Session) -> None:
        """Replace the whole session."""
        with self._lock:
            self._session = session

    def get(self, image_id: UUID) -> TrackedImage:
        """Return the current state of one image."""
        return self._session.find(image_id)

    def replace_image(self, expected: TrackedImage, updated: TrackedImage) -> Session:
        """Swap ``expected`` for ``updated`` and return the new session.

        The stored entry must still be ``expected``; an edit computed from a
        stale image raises ``EditConflictError`` and leaves the session as is.
        """
        with self._lock:
            if self._session.find(expected.id) is not expected:
                raise EditConflictError(
                    f"Image {expected.id} was changed by another edit"
                )
            self._session = self._session.replace(updated)
            return self._session
