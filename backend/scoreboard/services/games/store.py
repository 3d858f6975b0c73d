import threading
from typing import Dict, Optional

from scoreboard.errors import GameNotFound
from scoreboard.models import Game, User
from .scoring import check_score_range


class GameStore:
    """Game rows reached by id, plus the ambient game.

    The ambient game is the first row by id. ``resolve`` creates it on demand;
    ``ambient`` only looks it up.
    """

    def __init__(self, db, default_name: str = 'Main'):
        self.db = db
        self.default_name = default_name
        self._create_lock = threading.Lock()
        self._locks: Dict[int, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def lock_for(self, game_id: int) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(game_id, threading.Lock())

    def _forget_lock(self, game_id: int) -> None:
        with self._locks_guard:
            self._locks.pop(game_id, None)

    def ambient(self) -> Game:
        game = Game.query.order_by(Game.id).first()
        if game is None:
            raise GameNotFound()
        return game

    def resolve(self, game_id: Optional[int] = None) -> Game:
        if game_id is not None:
            game = self.db.session.get(Game, game_id)
            if game is None:
                raise GameNotFound(game_id)
            return game
        with self._create_lock:
            game = Game.query.order_by(Game.id).first()
            if game is None:
                game = Game(name=self.default_name, score=0)
                self.db.session.add(game)
                self.db.session.commit()
        return game

    def add_to_score(self, game_id: int, delta: int) -> int:
        """Add ``delta`` to the game's score and return the new total.

        Serialized per game id in process; ``FOR UPDATE`` covers other
        processes on databases that support row locks. A total that would
        leave the score column range raises ``InvalidPayload``.
        """
        # Unknown ids never get a lock entry
        if self.db.session.get(Game, game_id) is None:
            raise GameNotFound(game_id)
        with self.lock_for(game_id):
            try:
                game = self.db.session.get(Game, game_id, with_for_update=True, populate_existing=True)
                if game is None:
                    self._forget_lock(game_id)
                    raise GameNotFound(game_id)
                new_score = check_score_range((game.score or 0) + delta, what="resulting score")
                game.score = new_score
                self.db.session.commit()
            except Exception:
                self.db.session.rollback()
                raise
        return new_score

    def assign(self, user: User, game: Game) -> None:
        if user.game_id == game.id:
            return
        user.game_id = game.id
        self.db.session.add(user)
        self.db.session.commit()
