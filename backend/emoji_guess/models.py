import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from emoji_guess.services.games.registry import RoleRegistry


class Phase(str, enum.Enum):
    IDLE = 'idle'
    WORD_OFFERED = 'word_offered'
    CLUE_PENDING = 'clue_pending'
    CLUES_REVEALED = 'clues_revealed'


@dataclass
class RoundState:
    word: str = ''
    clues: List[str] = field(default_factory=list)
    candidates: List[str] = field(default_factory=list)
    attempts: Dict[str, int] = field(default_factory=dict)

    def copy(self) -> 'RoundState':
        return RoundState(self.word, list(self.clues), list(self.candidates), dict(self.attempts))


@dataclass
class RoomState:
    """Everything the single game room knows about itself."""

    registry: RoleRegistry = field(default_factory=RoleRegistry)
    phase: Phase = Phase.IDLE
    started: bool = False
    host_ready: bool = False
    round: RoundState = field(default_factory=RoundState)
    scores: Dict[str, int] = field(default_factory=dict)
    round_number: int = 1

    @property
    def host(self) -> Optional[str]:
        return self.registry.host

    @property
    def guessers(self) -> List[str]:
        return self.registry.guessers

    def copy(self) -> 'RoomState':
        return RoomState(
            registry=self.registry.copy(),
            phase=self.phase,
            started=self.started,
            host_ready=self.host_ready,
            round=self.round.copy(),
            scores=dict(self.scores),
            round_number=self.round_number,
        )

    def to_dict(self) -> Dict[str, Any]:
        # The secret word and the host's candidates stay private
        return {
            'host': self.host,
            'guessers': self.guessers,
            'phase': self.phase.value,
            'started': self.started,
            'hostReady': self.host_ready,
            'clues': list(self.round.clues),
            'scores': dict(self.scores),
            'round': self.round_number,
        }


@dataclass(frozen=True)
class Event:
    """An inbound event, tagged with the identity of the connection that sent it."""

    name: str
    sender: Optional[str] = None
    payload: Any = None


@dataclass(frozen=True)
class Outbound:
    """An outbound message.

    ``to`` set means unicast to that identity. Otherwise the message goes to
    every connection except ``skip``.
    """

    event: str
    payload: Any = None
    to: Optional[str] = None
    skip: Optional[str] = None

    @property
    def is_broadcast(self) -> bool:
        return self.to is None
