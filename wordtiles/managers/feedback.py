from __future__ import annotations
import asyncio
from typing import Awaitable, Callable, Optional

from ..schemas import FeedbackState

Listener = Callable[[FeedbackState], Awaitable[None]]


class FeedbackPresenter:
    """One transient message with a single owned clear timer.

    Showing a new message cancels the pending clear first, so an older timer
    can never wipe a newer message.
    """

    def __init__(self, duration_ms: int = 2000, on_change: Optional[Listener] = None):
        self.duration_ms = duration_ms
        self.on_change = on_change
        self.message: str = ''
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def snapshot(self) -> FeedbackState:
        return FeedbackState(message=self.message, visible=bool(self.message))

    async def show(self, message: str, duration_ms: Optional[int] = None):
        duration = self.duration_ms if duration_ms is None else duration_ms
        # Swap timers before notifying; the listener may yield to another show()
        self.cancel()
        self.message = message
        self._task = asyncio.create_task(self._clear_after(duration / 1000))
        await self._notify()

    def cancel(self):
        if self._task and not self._task.done():
            self._task.cancel()
        self._task = None

    def clear(self):
        self.cancel()
        self.message = ''

    async def _clear_after(self, delay: float):
        try:
            await asyncio.sleep(delay)
        except asyncio.CancelledError:
            return
        self.message = ''
        self._task = None
        await self._notify()

    async def _notify(self):
        if self.on_change:
            await self.on_change(self.snapshot())
