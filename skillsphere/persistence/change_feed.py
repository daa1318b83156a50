"""Invitation change feed backed by PostgreSQL LISTEN/NOTIFY.

A trigger on ``team_invitations`` (created by the migrations) publishes a
JSON payload ``{"id", "from_user_id", "to_user_id", "status"}`` on the
configured channel for every insert and update. One dedicated asyncpg
connection listens for the whole process and fans notifications out to the
subscribers whose user appears in the payload.

Delivery is at-least-once: when the listening connection drops it is
re-established with exponential backoff, and every subscriber is then
signalled once so it re-fetches whatever it may have missed.
"""

import asyncio
import json
from typing import Any

import asyncpg
import logfire
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from skillsphere.config import InvitationSettings
from skillsphere.domain.error import SubscriptionError
from skillsphere.domain.repository import ChangeListener, ChangeSubscription
from skillsphere.domain.value import UserId

_CONNECTION_ERRORS = (OSError, asyncpg.PostgresError, asyncpg.InterfaceError)


class PostgresInvitationChangeFeed:
    """Process-wide LISTEN connection shared by every invitation subscriber."""

    def __init__(self, dsn: str, settings: InvitationSettings) -> None:
        """Initialize change feed.

        Args:
            dsn: Plain PostgreSQL DSN (no SQLAlchemy driver suffix)
            settings: Channel name and reconnect policy
        """
        self.dsn = dsn
        self.channel = settings.change_channel
        self.settings = settings
        self._listeners: dict[int, tuple[str, ChangeListener]] = {}
        self._next_key = 0
        self._connection: asyncpg.Connection | None = None
        self._lock = asyncio.Lock()
        self._reconnect_task: asyncio.Task | None = None
        self._closing = False

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    async def subscribe(
        self, user_id: UserId, on_change: ChangeListener
    ) -> ChangeSubscription:
        """Register ``on_change`` for changes involving ``user_id``.

        Raises:
            SubscriptionError: If the LISTEN connection cannot be opened
        """
        async with self._lock:
            if self._connection is None or self._connection.is_closed():
                try:
                    await self._connect()
                except _CONNECTION_ERRORS as e:
                    logfire.error(
                        "Could not open invitation change feed",
                        channel=self.channel,
                        error=str(e),
                    )
                    raise SubscriptionError(
                        f"Could not listen on {self.channel}: {e}"
                    ) from e

            key = self._next_key
            self._next_key += 1
            self._listeners[key] = (str(user_id), on_change)

        async def unsubscribe() -> None:
            self._listeners.pop(key, None)
            if not self._listeners:
                await self.close()

        return ChangeSubscription(unsubscribe)

    async def close(self) -> None:
        """Drop the LISTEN connection (re-opened by the next subscribe)."""
        async with self._lock:
            self._closing = True
            try:
                task = self._reconnect_task
                if task is not None and not task.done():
                    task.cancel()
                    await asyncio.wait({task})
                self._reconnect_task = None

                connection = self._connection
                self._connection = None
                if connection is not None and not connection.is_closed():
                    await connection.close()
            finally:
                self._closing = False

    async def _connect(self) -> None:
        connection = await asyncpg.connect(self.dsn)
        try:
            connection.add_termination_listener(self._on_termination)
            await connection.add_listener(self.channel, self._on_notification)
        except BaseException:
            connection.terminate()
            raise
        self._connection = connection
        logfire.info("Listening for invitation changes", channel=self.channel)

    def _on_notification(
        self, connection: Any, pid: int, channel: str, payload: str
    ) -> None:
        try:
            data = json.loads(payload)
            involved = {str(data["from_user_id"]), str(data["to_user_id"])}
        except (ValueError, KeyError, TypeError):
            logfire.warn(
                "Malformed invitation notification, signalling everyone",
                channel=channel,
                payload=payload,
            )
            self._notify(None)
            return
        self._notify(involved)

    def _on_termination(self, connection: Any) -> None:
        if self._closing or connection is not self._connection:
            return
        self._connection = None
        if not self._listeners:
            return
        logfire.warn("Invitation change feed connection lost", channel=self.channel)
        if self._reconnect_task is None or self._reconnect_task.done():
            self._reconnect_task = asyncio.get_running_loop().create_task(
                self._reconnect()
            )

    async def _reconnect(self) -> None:
        try:
            async for attempt in AsyncRetrying(
                wait=wait_exponential(
                    multiplier=self.settings.reconnect_initial_delay,
                    max=self.settings.reconnect_max_delay,
                ),
                stop=stop_after_attempt(self.settings.reconnect_max_attempts),
                retry=retry_if_exception_type(_CONNECTION_ERRORS),
                reraise=True,
            ):
                with attempt:
                    async with self._lock:
                        if self._connection is None:
                            await self._connect()
        except _CONNECTION_ERRORS as e:
            logfire.error(
                "Giving up on invitation change feed",
                channel=self.channel,
                attempts=self.settings.reconnect_max_attempts,
                error=str(e),
            )
            return

        # Anything may have changed while we were disconnected
        self._notify(None)

    def _notify(self, involved: set[str] | None) -> None:
        for user_id, listener in list(self._listeners.values()):
            if involved is not None and user_id not in involved:
                continue
            try:
                listener()
            except Exception as e:
                logfire.error(
                    "Invitation change listener failed",
                    user_id=user_id,
                    error=str(e),
                    _exc_info=True,
                )
