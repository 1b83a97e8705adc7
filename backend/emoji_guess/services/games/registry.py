from typing import Any, Dict, List, Optional

HOST = 'host'
GUESSER = 'guesser'


class RoleRegistry:
    """Tracks who is hosting and who is guessing.

    Guessers are kept in an insertion-ordered dict so membership checks and
    removals stay O(1) while the join order is preserved for the roster.
    """

    def __init__(self, host: Optional[str] = None, guessers: Optional[List[str]] = None):
        self.host = host
        self._guessers: Dict[str, None] = {}
        for name in guessers or []:
            self.register(name)

    @property
    def guessers(self) -> List[str]:
        return list(self._guessers)

    def is_guesser(self, identity: str) -> bool:
        return identity in self._guessers

    def register(self, identity: str) -> bool:
        if identity == self.host or identity in self._guessers:
            return False
        self._guessers[identity] = None
        return True

    def promote_to_host(self, identity: str) -> bool:
        if self.host:
            return False
        self._guessers.pop(identity, None)
        self.host = identity
        return True

    def unregister(self, identity: Optional[str]) -> Optional[str]:
        """Remove ``identity`` and return the role it held, if any."""
        if identity is None:
            return None
        if identity == self.host:
            self.host = None
            return HOST
        if identity in self._guessers:
            del self._guessers[identity]
            return GUESSER
        return None

    def clear(self) -> None:
        self.host = None
        self._guessers.clear()

    def current_roster(self) -> Dict[str, Any]:
        return {'host': self.host, 'guessers': self.guessers}

    def copy(self) -> 'RoleRegistry':
        return RoleRegistry(self.host, self.guessers)
