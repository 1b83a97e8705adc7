import threading
from flask import current_app, request
from emoji_guess import socketio
from emoji_guess.models import Event, Outbound
from emoji_guess.services.games.engine import clean_name
from emoji_guess.services.games.session import get_room
from typing import Any, Dict, Iterable, List, Optional, Set


class ConnectionDirectory:
    """Maps socket session ids to player identities and back.

    The same name may be held by more than one socket (two tabs); the
    identity is only released once its last socket goes away.
    """

    def __init__(self):
        self._identity_by_sid: Dict[str, str] = {}
        self._sids_by_identity: Dict[str, Set[str]] = {}
        self._lock = threading.Lock()

    def identity_for(self, sid: str) -> Optional[str]:
        return self._identity_by_sid.get(sid)

    def sids_for(self, identity: Optional[str]) -> Set[str]:
        if identity is None:
            return set()
        return set(self._sids_by_identity.get(identity, ()))

    def rebind(self, sid: str, identity: str) -> Optional[str]:
        """Move ``sid`` to ``identity``; return the old name if ``sid`` was its last socket."""
        with self._lock:
            previous = self._release(sid)
            self._identity_by_sid[sid] = identity
            self._sids_by_identity.setdefault(identity, set()).add(sid)
            return previous

    def release(self, sid: str) -> Optional[str]:
        """Forget ``sid``; return its identity if no other socket still holds it."""
        with self._lock:
            return self._release(sid)

    def _release(self, sid: str) -> Optional[str]:
        identity = self._identity_by_sid.pop(sid, None)
        if identity is None:
            return None
        sids = self._sids_by_identity.get(identity, set())
        sids.discard(sid)
        if sids:
            return None
        self._sids_by_identity.pop(identity, None)
        return identity


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _connections() -> ConnectionDirectory:
    return current_app.extensions['emoji_guess_connections']


def _deliver(messages: Iterable[Outbound]) -> None:
    """Send each message to one identity's sockets, or to everyone but ``skip``."""
    connections = _connections()
    for message in messages:
        args = () if message.payload is None else (message.payload,)
        if message.is_broadcast:
            skip = list(connections.sids_for(message.skip))
            socketio.emit(message.event, *args, skip_sid=skip or None)
        else:
            for sid in connections.sids_for(message.to):
                socketio.emit(message.event, *args, to=sid)
        if message.event == 'error':
            current_app.logger.warning(f"[error] to={message.to} message={message.payload}")


def _apply(name: str, sender: Optional[str], payload: Any = None) -> List[Outbound]:
    messages = get_room().dispatch(Event(name, sender, payload))
    _deliver(messages)
    return messages


def _dispatch(name: str, payload: Any = None) -> List[Outbound]:
    return _apply(name, _connections().identity_for(_get_sid()), payload)


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    # Only the last socket holding a name takes the player out of the room
    identity = _connections().release(_get_sid())
    current_app.logger.info(f"[disconnect] sid={_get_sid()} name={identity}")
    if identity is not None:
        _apply('disconnect', identity)


def handle_login(username=None):
    name = clean_name(username)
    if not name:
        return
    # Rebind before the room sees the login; the old name leaves only with its last socket
    previous = _connections().rebind(_get_sid(), name)
    _apply('login', previous, name)
    current_app.logger.info(f"[login] sid={_get_sid()} name={name} previous={previous}")


def handle_become_host(username=None):
    sid = _get_sid()
    connections = _connections()
    sender = connections.identity_for(sid)
    name = clean_name(username)
    claimed = sender is None and name is not None
    if claimed:
        # A socket that never logged in claims the name it asks to host under
        connections.rebind(sid, name)
    messages = _apply('becomeHost', sender, username)
    if messages:
        current_app.logger.info(f"[host] name={get_room().state.host}")
    elif claimed:
        connections.release(sid)


def handle_start_game(data=None):
    messages = _dispatch('startGame')
    if any(m.event == 'gameStarted' for m in messages):
        current_app.logger.info(f"[start] host={get_room().state.host}")


def handle_select_word(word=None):
    messages = _dispatch('selectWord', word)
    if messages:
        current_app.logger.info(f"[select] host={get_room().state.host}")


def handle_set_emojis(emojis=None):
    _dispatch('setEmojis', emojis)


def handle_host_ready(emojis=None):
    _dispatch('hostReady', emojis)


def handle_make_guess(data=None):
    messages = _dispatch('makeGuess', data)
    for message in messages:
        if message.event == 'correctGuess':
            current_app.logger.info(
                f"[correct] name={message.payload['winner']} points={message.payload['points']}"
            )
        elif message.event == 'guessResponse':
            current_app.logger.info(
                f"[guess] name={message.to} similarity={message.payload['similarity']:.2f}"
            )


def handle_play_again(data=None):
    _dispatch('playAgain')
    current_app.logger.info("[reset] room reset")


def handle_request_new_words(data=None):
    _dispatch('requestNewWords')


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the default namespace."""
    socketio.on_event('connect', handle_connect)
    socketio.on_event('disconnect', handle_disconnect)
    socketio.on_event('login', handle_login)
    socketio.on_event('becomeHost', handle_become_host)
    socketio.on_event('startGame', handle_start_game)
    socketio.on_event('selectWord', handle_select_word)
    # Older clients announce the pick as 'wordSelected'
    socketio.on_event('wordSelected', handle_select_word)
    socketio.on_event('setEmojis', handle_set_emojis)
    socketio.on_event('hostReady', handle_host_ready)
    socketio.on_event('makeGuess', handle_make_guess)
    socketio.on_event('playAgain', handle_play_again)
    socketio.on_event('requestNewWords', handle_request_new_words)
