"""Game domain services: the score relay and its collaborators.

This package contains the domain logic behind the Socket.IO handlers,
keeping transport concerns separated from the game store, the listener
sets and score validation.
"""
from .listeners import Listener, ListenerRegistry
from .relay import ScoreRelay
from .scoring import parse_score_delta
from .store import GameStore

__all__ = ['GameStore', 'Listener', 'ListenerRegistry', 'ScoreRelay', 'parse_score_delta']
