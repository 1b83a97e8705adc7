"""Round lifecycle as a pure reducer.

``handle(event, state, rules)`` never touches the input state. It returns a
new ``RoomState`` plus the outbound messages the transport should deliver.
An event whose preconditions are not met returns the input state and no
messages, so a client can never tell a rejected event from a dropped one.

Phases::

    IDLE -> WORD_OFFERED -> CLUE_PENDING -> CLUES_REVEALED -> IDLE
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from emoji_guess.models import Event, Outbound, Phase, RoomState, RoundState
from .registry import HOST
from .scoring import DEFAULT_POLICY, ScoringPolicy
from .similarity import feedback_for, normalize, similarity
from .words import WordBank, WordSamplingError

SELECTING_MESSAGE = 'Host is selecting emojis...'
HOST_LEFT_MESSAGE = 'The host left, round abandoned.'
SAMPLING_ERROR_MESSAGE = 'Failed to generate new words'


@dataclass(frozen=True)
class GameRules:
    words: WordBank = field(default_factory=WordBank)
    policy: ScoringPolicy = DEFAULT_POLICY
    option_count: int = 3


def clean_name(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _clean_clues(value: Any) -> Optional[List[str]]:
    if not isinstance(value, (list, tuple)) or not value:
        return None
    if not all(isinstance(clue, str) for clue in value):
        return None
    return list(value)


def _guess_text(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        payload = payload.get('text', payload.get('guess'))
    if not isinstance(payload, str) or not payload.strip():
        return None
    return payload


def _players(state: RoomState) -> Outbound:
    return Outbound('updatePlayers', state.registry.current_roster())


def _clear_round(state: RoomState) -> None:
    state.round = RoundState()
    state.phase = Phase.IDLE
    state.started = False
    state.host_ready = False


def _remove(state: RoomState, identity: str) -> List[Outbound]:
    role = state.registry.unregister(identity)
    if role is None:
        return []
    messages = []
    if role == HOST and state.phase != Phase.IDLE:
        _clear_round(state)
        messages.append(Outbound('gameMessage', HOST_LEFT_MESSAGE))
    messages.append(_players(state))
    return messages


def _login(state: RoomState, event: Event, rules: GameRules):
    name = clean_name(event.payload)
    if not name:
        return None
    messages = []
    if event.sender and event.sender != name:
        # Re-login under a new name releases the old one
        messages = [m for m in _remove(state, event.sender) if m.event != 'updatePlayers']
    state.registry.register(name)
    messages.append(_players(state))
    return messages


def _become_host(state: RoomState, event: Event, rules: GameRules):
    name = clean_name(event.payload) or event.sender
    if not name:
        return None
    if event.sender is None:
        # Without a login a connection may only claim a name nobody holds
        if name == state.host or state.registry.is_guesser(name):
            return None
    elif name != event.sender:
        return None
    if not state.registry.promote_to_host(name):
        return None
    return [_players(state)]


def _sample(rules: GameRules, requester: str):
    try:
        return rules.words.sample(rules.option_count), None
    except WordSamplingError:
        return None, [Outbound('error', SAMPLING_ERROR_MESSAGE, to=requester)]


def _start_game(state: RoomState, event: Event, rules: GameRules):
    if not state.host or not state.guessers or state.phase != Phase.IDLE:
        return None
    candidates, failure = _sample(rules, event.sender)
    if failure:
        return failure
    _clear_round(state)
    state.round.candidates = candidates
    state.started = True
    state.phase = Phase.WORD_OFFERED
    return [
        Outbound('wordOptions', list(candidates), to=state.host),
        Outbound('gameStarted'),
    ]


def _request_new_words(state: RoomState, event: Event, rules: GameRules):
    candidates, failure = _sample(rules, event.sender)
    if failure:
        return failure
    if event.sender == state.host and state.phase == Phase.WORD_OFFERED:
        state.round.candidates = candidates
    return [Outbound('wordOptions', list(candidates), to=event.sender)]


def _select_word(state: RoomState, event: Event, rules: GameRules):
    if event.sender != state.host:
        return None
    if state.phase not in (Phase.WORD_OFFERED, Phase.CLUE_PENDING):
        return None
    word = clean_name(event.payload)
    if not word or word not in state.round.candidates:
        return None
    state.round.word = word
    state.phase = Phase.CLUE_PENDING
    return [Outbound('gameMessage', SELECTING_MESSAGE, skip=state.host)]


def _accept_clues(state: RoomState, event: Event) -> Optional[List[str]]:
    if event.sender != state.host:
        return None
    if state.phase not in (Phase.CLUE_PENDING, Phase.CLUES_REVEALED):
        return None
    clues = _clean_clues(event.payload)
    if clues is None:
        return None
    state.round.clues = clues
    state.phase = Phase.CLUES_REVEALED
    return clues


def _set_emojis(state: RoomState, event: Event, rules: GameRules):
    clues = _accept_clues(state, event)
    if clues is None:
        return None
    return [Outbound('gameState', {'clues': list(clues)})]


def _host_ready(state: RoomState, event: Event, rules: GameRules):
    clues = _accept_clues(state, event)
    if clues is None:
        return None
    state.host_ready = True
    return [Outbound('hostConfirmed', list(clues))]


def _make_guess(state: RoomState, event: Event, rules: GameRules):
    if state.phase != Phase.CLUES_REVEALED or not state.registry.is_guesser(event.sender):
        return None
    text = _guess_text(event.payload)
    if text is None:
        return None
    guess, word = normalize(text), normalize(state.round.word)
    attempts = state.round.attempts.get(event.sender, 0)

    if guess == word:
        points = rules.policy.points(attempts)
        state.scores[event.sender] = state.scores.get(event.sender, 0) + points
        answer = state.round.word
        _clear_round(state)
        state.round_number += 1
        return [Outbound('correctGuess', {
            'winner': event.sender,
            'word': answer,
            'points': points,
            'newScores': dict(state.scores),
        })]

    state.round.attempts[event.sender] = attempts + 1
    score = similarity(guess, word)
    return [Outbound('guessResponse', {
        'message': feedback_for(score),
        'similarity': score,
    }, to=event.sender)]


def _play_again(state: RoomState, event: Event, rules: GameRules):
    state.registry.clear()
    state.scores = {}
    state.round_number = 1
    _clear_round(state)
    return [Outbound('resetGame')]


def _disconnect(state: RoomState, event: Event, rules: GameRules):
    return _remove(state, event.sender) or None


Handler = Callable[[RoomState, Event, GameRules], Optional[List[Outbound]]]

HANDLERS: Dict[str, Handler] = {
    'login': _login,
    'becomeHost': _become_host,
    'startGame': _start_game,
    'selectWord': _select_word,
    'setEmojis': _set_emojis,
    'hostReady': _host_ready,
    'makeGuess': _make_guess,
    'playAgain': _play_again,
    'requestNewWords': _request_new_words,
    'disconnect': _disconnect,
}

# Events a connection may send before it has logged in
ANONYMOUS_EVENTS = frozenset({'login', 'becomeHost', 'disconnect'})


def handle(event: Event, state: RoomState, rules: GameRules) -> Tuple[RoomState, List[Outbound]]:
    handler = HANDLERS.get(event.name)
    if handler is None:
        return state, []
    if event.sender is None and event.name not in ANONYMOUS_EVENTS:
        return state, []
    new_state = state.copy()
    messages = handler(new_state, event, rules)
    if messages is None:
        return state, []
    return new_state, messages
