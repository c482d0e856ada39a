"""Input events and the keyboard mapping that produces them."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class EventKind(str, Enum):
    """Signals understood by the event loop."""

    TICK = "tick"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    ROTATE = "rotate"
    QUIT = "quit"
    ERROR = "error"


@dataclass(frozen=True)
class InputEvent:
    kind: EventKind
    detail: Optional[str] = None


TICK = InputEvent(EventKind.TICK)

KEY_ESCAPE = 27

KEY_BINDINGS: Dict[int, EventKind] = {
    curses.KEY_LEFT: EventKind.MOVE_LEFT,
    curses.KEY_RIGHT: EventKind.MOVE_RIGHT,
    curses.KEY_DOWN: EventKind.MOVE_DOWN,
    curses.KEY_UP: EventKind.ROTATE,
    KEY_ESCAPE: EventKind.QUIT,
}


def map_key(code: int) -> Optional[InputEvent]:
    """Translate a raw key code into an event, or ``None`` if it is unbound."""

    kind = KEY_BINDINGS.get(code)
    if kind is None:
        return None
    return InputEvent(kind)


def error_event(detail: str) -> InputEvent:
    return InputEvent(EventKind.ERROR, detail)
