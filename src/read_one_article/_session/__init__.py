# Area: Session
"""
Session - match orchestration across rounds.

This package handles:
- Starting and stopping a match between two players
- Role swapping and score carry-over between rounds
- Candidate fetches guarded against stale results
"""

from .controller import SessionController
from .fetch_guard import CandidateRequest, FetchGuard
from .players import validate_player_names

__all__ = [
    "SessionController",
    "CandidateRequest",
    "FetchGuard",
    "validate_player_names",
]
