"""Registry of invitation engines, one per signed-in user."""

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass

import logfire

from skillsphere.application.engine.invitation_engine import InvitationEngine
from skillsphere.domain.repository import (
    ChangeSubscription,
    InvitationRepository,
    ProfileRepository,
)
from skillsphere.domain.value import UserId


@dataclass
class _Session:
    engine: InvitationEngine
    last_access: float
    subscription: ChangeSubscription | None = None


class InvitationEngineRegistry:
    """Owns the invitation engine of every open user session.

    An engine is created on first access, subscribed to the change feed and
    loaded once. Sessions end on ``release`` (logout), when idle longer than
    ``idle_timeout`` (see ``evict_idle`` and ``start_reaper``), or on
    ``close_all`` at application shutdown.

    Opening a session is serialized per user only; an open, subscribed
    session is returned without waiting on anything.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        profile_repository: ProfileRepository,
        idle_timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize registry.

        Args:
            invitation_repository: Invitation repository shared by all engines
            profile_repository: Profile repository shared by all engines
            idle_timeout: Seconds without access before a session is evicted
                (None keeps sessions until released)
            clock: Monotonic time source
        """
        self.invitation_repository = invitation_repository
        self.profile_repository = profile_repository
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._sessions: dict[UserId, _Session] = {}
        self._open_locks: dict[UserId, asyncio.Lock] = {}
        self._reaper_task: asyncio.Task | None = None

    def __contains__(self, user_id: UserId) -> bool:
        return user_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    async def get_engine(self, user_id: UserId) -> InvitationEngine:
        """Return the user's engine, opening the session if needed.

        If the change feed could not be opened earlier, subscribing is
        retried on each access until it succeeds.
        """
        session = self._sessions.get(user_id)
        if session is not None and session.subscription is not None:
            session.last_access = self._clock()
            return session.engine

        lock = self._open_locks.setdefault(user_id, asyncio.Lock())
        async with lock:
            session = self._sessions.get(user_id)
            if session is None:
                session = await self._open(user_id)
                self._sessions[user_id] = session
            elif session.subscription is None:
                session.subscription = await self._subscribe(session.engine, user_id)
            session.last_access = self._clock()
            return session.engine

    async def release(self, user_id: UserId) -> bool:
        """Close a user's session.

        Returns:
            True if a session was open
        """
        session = self._sessions.pop(user_id, None)
        lock = self._open_locks.get(user_id)
        if lock is not None and not lock.locked():
            del self._open_locks[user_id]
        if session is None:
            return False
        await session.engine.close()
        logfire.info("Invitation session released", user_id=str(user_id))
        return True

    async def evict_idle(self) -> int:
        """Release every session idle for at least ``idle_timeout``.

        Returns:
            Number of sessions released
        """
        if self.idle_timeout is None:
            return 0
        cutoff = self._clock() - self.idle_timeout
        idle = [
            user_id
            for user_id, session in self._sessions.items()
            if session.last_access <= cutoff
        ]
        released = 0
        for user_id in idle:
            session = self._sessions.get(user_id)
            # Touched again while earlier sessions were being closed
            if session is None or session.last_access > cutoff:
                continue
            if await self.release(user_id):
                released += 1
        if released:
            logfire.info(
                "Idle invitation sessions evicted",
                count=released,
                idle_timeout=self.idle_timeout,
            )
        return released

    def start_reaper(self, interval: float) -> None:
        """Run ``evict_idle`` every ``interval`` seconds until ``close_all``."""
        if self._reaper_task is None or self._reaper_task.done():
            self._reaper_task = asyncio.get_running_loop().create_task(
                self._reap(interval)
            )

    async def close_all(self) -> None:
        """Stop the reaper and close every open session."""
        task = self._reaper_task
        self._reaper_task = None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})

        sessions = list(self._sessions.values())
        self._sessions.clear()
        self._open_locks.clear()
        for session in sessions:
            await session.engine.close()
        logfire.info("Invitation sessions closed", count=len(sessions))

    async def _open(self, user_id: UserId) -> _Session:
        with logfire.span(
            "invitation_engine_registry.open_session", user_id=str(user_id)
        ):
            engine = InvitationEngine(self.invitation_repository, self.profile_repository)
            session = _Session(engine=engine, last_access=self._clock())
            try:
                session.subscription = await self._subscribe(engine, user_id)
                await engine.fetch_invitations(user_id)
            except BaseException:
                # Cancelled mid-open; drop the half-open subscription
                await engine.close()
                raise
            return session

    async def _subscribe(
        self, engine: InvitationEngine, user_id: UserId
    ) -> ChangeSubscription | None:
        result = await engine.subscribe_to_invitations(user_id)
        if result:
            return result.value
        logfire.warn(
            "Live invitation updates unavailable",
            user_id=str(user_id),
            error=result.message,
        )
        return None

    async def _reap(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            try:
                await self.evict_idle()
            except Exception as e:
                logfire.error(
                    "Idle session eviction failed", error=str(e), _exc_info=True
                )
