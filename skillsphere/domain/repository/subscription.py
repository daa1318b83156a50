"""Change subscription handle."""

from collections.abc import Awaitable, Callable

ChangeListener = Callable[[], None]
"""Callback fired when something relevant changed. Carries no payload."""


class ChangeSubscription:
    """Cancellation handle for a change subscription.

    ``cancel()`` may be awaited any number of times; only the first call
    runs the unsubscribe hook.
    """

    def __init__(self, unsubscribe: Callable[[], Awaitable[None]]) -> None:
        self._unsubscribe = unsubscribe
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    async def cancel(self) -> None:
        """Stop receiving change notifications."""
        if self._cancelled:
            return
        self._cancelled = True
        await self._unsubscribe()
