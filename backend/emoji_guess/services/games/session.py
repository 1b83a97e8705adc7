import threading
from typing import Any, Dict, List, Optional

from flask import current_app

from emoji_guess.models import Event, Outbound, RoomState
from .engine import GameRules, handle


class RoomSession:
    """Owns the room state and feeds events through the reducer one at a time.

    Socket handlers may run on several threads, so every event is applied
    under a lock and the new state is committed before its messages are
    returned for delivery.
    """

    def __init__(self, rules: GameRules, state: Optional[RoomState] = None):
        self.rules = rules
        self._state = state or RoomState()
        self._lock = threading.Lock()

    @property
    def state(self) -> RoomState:
        return self._state

    def dispatch(self, event: Event) -> List[Outbound]:
        with self._lock:
            self._state, messages = handle(event, self._state, self.rules)
        return messages

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return self._state.to_dict()


def get_room() -> RoomSession:
    return current_app.extensions['emoji_guess']
