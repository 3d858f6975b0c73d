from typing import Any, Callable, Optional

from flask import current_app

from scoreboard.errors import InvalidPayload
from scoreboard.models import Game
from .listeners import Listener, ListenerRegistry
from .scoring import SCORE_MAX as GAME_ID_MAX, parse_score_delta
from .store import GameStore


def _parse_game_id(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    # Only real ints or plain digit strings; floats and padded strings are refused
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, str) and raw.isascii() and raw.isdigit():
        value = int(raw)
    else:
        raise InvalidPayload(f"id must be an integer, got {raw!r}")
    if not 0 < value <= GAME_ID_MAX:
        raise InvalidPayload(f"id {value} is out of range")
    return value


class ScoreRelay:
    """Relays score updates to every connection subscribed to a game.

    ``send`` is called as ``send(event, payload, to=sid, namespace=ns)``,
    which is the signature of ``socketio.emit``.
    """

    def __init__(self, store: GameStore, listeners: ListenerRegistry,
                 send: Callable[..., Any], event: str = 'score'):
        self.store = store
        self.listeners = listeners
        self.send = send
        self.event = event

    def subscribe(self, listener: Listener, game_id: Any = None) -> Game:
        game = self.store.resolve(_parse_game_id(game_id))
        self.listeners.add(game.id, listener)
        current_app.logger.info(f"[subscribe] game={game.id} sid={listener.sid}")
        return game

    def unsubscribe(self, listener: Listener) -> Optional[int]:
        game_id = self.listeners.remove(listener)
        if game_id is not None:
            current_app.logger.info(f"[unsubscribe] game={game_id} sid={listener.sid}")
        return game_id

    def update_score(self, listener: Listener, data: Any) -> int:
        """Apply a score delta and broadcast the new total.

        The target is the game the listener is subscribed to, or the ambient
        game for a connection that never subscribed. The sender receives the
        broadcast like any other listener.
        """
        delta = parse_score_delta(data)
        game_id = self.listeners.game_for(listener)
        if game_id is None:
            game_id = self.store.ambient().id
        new_score = self.store.add_to_score(game_id, delta)
        current_app.logger.info(f"[score] game={game_id} delta={delta} score={new_score} sid={listener.sid}")
        self.broadcast(game_id, {'score': new_score})
        return new_score

    def broadcast(self, game_id: int, payload: dict) -> int:
        """Best-effort fan-out; returns how many listeners were handed the payload."""
        delivered = 0
        for listener in self.listeners.listeners(game_id):
            try:
                self.send(self.event, payload, to=listener.sid, namespace=listener.namespace)
            except Exception as exc:
                current_app.logger.warning(f"[broadcast] game={game_id} sid={listener.sid} delivery failed: {exc}")
                continue
            delivered += 1
        return delivered
