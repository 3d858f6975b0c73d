import threading
from collections import defaultdict
from typing import Dict, List, NamedTuple, Optional, Set


class Listener(NamedTuple):
    """A Socket.IO connection, addressed by sid within a namespace."""
    sid: str
    namespace: str


class ListenerRegistry:
    """Listener sets keyed by game id.

    A listener belongs to at most one game; adding it to another game moves it.
    """

    def __init__(self):
        self._by_game: Dict[int, Set[Listener]] = defaultdict(set)
        self._game_of: Dict[Listener, int] = {}
        self._lock = threading.Lock()

    def add(self, game_id: int, listener: Listener) -> None:
        with self._lock:
            self._discard(listener)
            self._by_game[game_id].add(listener)
            self._game_of[listener] = game_id

    def remove(self, listener: Listener) -> Optional[int]:
        """Drop the listener and return the game it was listening to, if any."""
        with self._lock:
            return self._discard(listener)

    def game_for(self, listener: Listener) -> Optional[int]:
        with self._lock:
            return self._game_of.get(listener)

    def listeners(self, game_id: int) -> List[Listener]:
        # Snapshot so callers can iterate while others subscribe
        with self._lock:
            return list(self._by_game.get(game_id, ()))

    def _discard(self, listener: Listener) -> Optional[int]:
        game_id = self._game_of.pop(listener, None)
        if game_id is None:
            return None
        members = self._by_game.get(game_id)
        if members is not None:
            members.discard(listener)
            if not members:
                del self._by_game[game_id]
        return game_id
