import math
from numbers import Real
from typing import Any

from scoreboard.errors import InvalidPayload

# games.score is a 32-bit INTEGER on PostgreSQL; SQLite shares no tighter bound
SCORE_MIN = -2 ** 31
SCORE_MAX = 2 ** 31 - 1


def check_score_range(value: int, what: str = 'score') -> int:
    if not SCORE_MIN <= value <= SCORE_MAX:
        raise InvalidPayload(f'{what} {value} is outside [{SCORE_MIN}, {SCORE_MAX}]')
    return value


def parse_score_delta(data: Any) -> int:
    """Validate a ``scoreUpdate`` payload and return its integer delta.

    The payload must be an object with a numeric ``score``. Booleans and
    strings (numeric or not) are rejected, as are non-integral floats and
    values that do not fit the score column. Negative deltas are allowed.
    """
    if not isinstance(data, dict):
        raise InvalidPayload('Payload must be an object with a score field')
    if 'score' not in data:
        raise InvalidPayload('score is required')
    raw = data['score']
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise InvalidPayload(f'score must be a number, got {raw!r}')
    if not isinstance(raw, int):
        raw = float(raw)
        if not math.isfinite(raw) or not raw.is_integer():
            raise InvalidPayload(f'score must be a whole number, got {raw!r}')
        raw = int(raw)
    return check_score_range(raw)
