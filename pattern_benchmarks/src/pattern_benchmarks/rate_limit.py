"""Per-user request counting with explicitly scheduled window resets."""

from __future__ import annotations

from collections.abc import Callable
import logging
import time

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100
DEFAULT_WINDOW_S = 60.0


class RateLimiter:
    """Counts requests per user and refuses them past `limit`.

    Each accepted request can schedule a reset of that user's counter after the
    window elapses. Resets are plain deadlines held by the limiter; they apply
    when `expire()` runs (also on every `allow()`) and can be cancelled.
    """

    def __init__(
        self,
        limit: int = DEFAULT_LIMIT,
        window_s: float | None = DEFAULT_WINDOW_S,
        clock: Callable[[], float] = time.monotonic,
    ):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if window_s is not None and window_s <= 0:
            raise ValueError("window_s must be positive")
        self.limit = limit
        self.window_s = window_s
        self._clock = clock
        self._counts: dict[int, int] = {}
        # user id -> (deadline, count restored at the deadline)
        self._pending_resets: dict[int, tuple[float, int]] = {}

    def count(self, user_id: int) -> int:
        return self._counts.get(user_id, 0)

    @property
    def pending_resets(self) -> dict[int, float]:
        return {user_id: deadline for user_id, (deadline, _) in self._pending_resets.items()}

    def allow(self, user_id: int) -> bool:
        """Record a request for the user; False when the limit is already reached."""
        self.expire()
        current = self.count(user_id)
        if current >= self.limit:
            return False
        self._counts[user_id] = current + 1
        if self.window_s is not None:
            self.schedule_reset(user_id, self.window_s, restore_to=current)
        return True

    def schedule_reset(self, user_id: int, delay_s: float, restore_to: int = 0) -> float:
        """Schedule the user's counter to drop to `restore_to` after `delay_s`.

        A later schedule for the same user replaces the earlier one but keeps the
        lowest restore value. Returns the deadline.
        """
        deadline = self._clock() + delay_s
        existing = self._pending_resets.get(user_id)
        if existing is not None:
            restore_to = min(restore_to, existing[1])
        self._pending_resets[user_id] = (deadline, restore_to)
        return deadline

    def cancel_reset(self, user_id: int) -> bool:
        return self._pending_resets.pop(user_id, None) is not None

    def cancel_all(self) -> int:
        cancelled = len(self._pending_resets)
        self._pending_resets.clear()
        return cancelled

    def expire(self, now: float | None = None) -> int:
        """Apply every reset whose deadline has passed; returns how many applied."""
        now = self._clock() if now is None else now
        due = [user_id for user_id, (deadline, _) in self._pending_resets.items() if deadline <= now]
        for user_id in due:
            _, restore_to = self._pending_resets.pop(user_id)
            self._counts[user_id] = restore_to
        if due:
            logger.debug("Applied %d rate limit resets", len(due))
        return len(due)
