from flask import Blueprint, jsonify
from scoreboard.models import Game


games = Blueprint('games', __name__)


@games.route('', methods=['GET'])
def list_games():
    # Score is only ever pushed over the socket
    rows = Game.query.order_by(Game.id).all()
    return jsonify([game.to_dict(include_score=False) for game in rows])
