import os

import sqlalchemy as sa
from flask_migrate import upgrade

from scoreboard import db

MIGRATIONS_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'migrations'))


def test_migrations_build_schema(file_app):
    with file_app.app_context():
        upgrade(directory=MIGRATIONS_DIR)
        insp = sa.inspect(db.engine)

        assert {'users', 'games', 'players'} <= set(insp.get_table_names())
        game_cols = {c['name'] for c in insp.get_columns('games')}
        assert {'id', 'name', 'score', 'created_at', 'updated_at'} <= game_cols
        user_cols = {c['name'] for c in insp.get_columns('users')}
        assert {'id', 'name', 'position', 'game_id'} <= user_cols


def test_migrated_schema_accepts_models(file_app):
    from scoreboard.models import Game, User

    with file_app.app_context():
        upgrade(directory=MIGRATIONS_DIR)
        game = Game(name='Main')
        db.session.add(game)
        db.session.commit()
        assert game.score == 0
        user = User(game_id=game.id)
        db.session.add(user)
        db.session.commit()
        assert user.game.name == 'Main'
