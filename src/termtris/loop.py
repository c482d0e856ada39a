"""Event loop merging gravity ticks and keyboard input.

Two producer tasks feed a single :class:`asyncio.Queue`:

* a ticker that enqueues a tick every ``interval_ms`` milliseconds, and
* an input pump that polls the non-blocking input source, sleeping for
  ``poll_ms`` whenever no key is waiting.

One coroutine consumes the queue, so every change to the game state happens
strictly in sequence without locks.  Both producers run on the event loop
thread, which keeps every terminal call (reads and draws) on one thread.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Callable, Dict, Optional, Protocol

from .errors import InputError
from .events import TICK, EventKind, InputEvent, error_event
from .game_state import GameState, GameStatus
from .utils import GRAVITY_MS

LOGGER = logging.getLogger(__name__)

# Milliseconds between keyboard polls while no key is pending
POLL_MS = 10


class InputSource(Protocol):
    def read(self) -> Optional[InputEvent]:
        """Return the next event without blocking; ``None`` if there is none."""


class Renderer(Protocol):
    def draw(self, state: GameState) -> None:
        """Redraw the whole screen from ``state``."""


class EventLoop:
    """Drive a :class:`GameState` from ticks and input until it finishes."""

    def __init__(
        self,
        state: GameState,
        source: InputSource,
        renderer: Renderer,
        *,
        interval_ms: float = GRAVITY_MS,
        poll_ms: float = POLL_MS,
    ) -> None:
        self.state = state
        self.source = source
        self.renderer = renderer
        self.interval_ms = interval_ms
        self.poll_ms = poll_ms
        self._actions: Dict[EventKind, Callable[[], None]] = {
            EventKind.TICK: state.tick,
            EventKind.MOVE_LEFT: state.move_left,
            EventKind.MOVE_RIGHT: state.move_right,
            EventKind.MOVE_DOWN: state.soft_drop,
            EventKind.ROTATE: state.rotate,
            EventKind.QUIT: state.quit,
        }

    def dispatch(self, event: InputEvent) -> None:
        """Apply a single event to the game state.

        Raises:
            InputError: For ``ERROR`` events; the game cannot continue.
        """

        LOGGER.debug("Processing %s", event.kind.value)
        if event.kind is EventKind.ERROR:
            LOGGER.error("Input source failed: %s", event.detail)
            raise InputError(event.detail or "input error")
        self._actions[event.kind]()

    async def _tick_forever(self, queue: "asyncio.Queue[InputEvent]") -> None:
        while True:
            await asyncio.sleep(self.interval_ms / 1000.0)
            queue.put_nowait(TICK)

    async def _pump(self, queue: "asyncio.Queue[InputEvent]") -> None:
        while True:
            try:
                event = self.source.read()
            except Exception as exc:
                event = error_event(str(exc))
            if event is None:
                await asyncio.sleep(self.poll_ms / 1000.0)
                continue
            queue.put_nowait(event)
            if event.kind in (EventKind.QUIT, EventKind.ERROR):
                return
            await asyncio.sleep(0)

    async def run(self) -> GameStatus:
        """Run until the game is over or the player quits.

        Draws once at start and once after every processed signal, including
        the last one.  Returns the final status.
        """

        queue: "asyncio.Queue[InputEvent]" = asyncio.Queue()
        producers = [
            asyncio.create_task(self._tick_forever(queue)),
            asyncio.create_task(self._pump(queue)),
        ]
        try:
            self.renderer.draw(self.state)
            while not self.state.finished:
                event = await queue.get()
                self.dispatch(event)
                self.renderer.draw(self.state)
        finally:
            for task in producers:
                task.cancel()
            for task in producers:
                with contextlib.suppress(asyncio.CancelledError):
                    await task
        return self.state.status
