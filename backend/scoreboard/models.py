from scoreboard import db
from flask_login import UserMixin
from datetime import datetime, timezone


def _utcnow():
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=_utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)


class User(UserMixin, TimestampMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    position = db.Column(db.Float, nullable=True)
    # Last game this user subscribed to; the superseded players table is not mapped
    game_id = db.Column(db.Integer, db.ForeignKey('games.id'), nullable=True)
    game = db.relationship('Game', back_populates='users')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'position': self.position,
            'game_id': self.game_id,
        }


class Game(TimestampMixin, db.Model):
    __tablename__ = 'games'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    score = db.Column(db.Integer, default=0, server_default='0', nullable=False)
    users = db.relationship('User', back_populates='game')

    def to_dict(self, include_score=True):
        data = {
            'id': self.id,
            'name': self.name,
        }
        if include_score:
            data['score'] = self.score
        return data
