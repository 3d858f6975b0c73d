"""Errors raised by the identity resolver and the score relay.

Every error is local to the request or socket message that raised it.
Socket handlers turn them into an ``error`` event for the sender only.
"""


class ScoreboardError(Exception):
    code = 'ScoreboardError'

    def __init__(self, message=None):
        super().__init__(message or self.code)

    def to_dict(self):
        return {'error': self.code, 'message': str(self)}


class AuthResolutionError(ScoreboardError):
    """The identity cookie is present but cannot be resolved to a user id."""
    code = 'AuthResolutionError'


class GameNotFound(ScoreboardError):
    code = 'GameNotFound'

    def __init__(self, game_id=None):
        self.game_id = game_id
        if game_id is None:
            message = 'No game exists yet'
        else:
            message = f'Game {game_id} not found'
        super().__init__(message)


class InvalidPayload(ScoreboardError):
    code = 'InvalidPayload'
