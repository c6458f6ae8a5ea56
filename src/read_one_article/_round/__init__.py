# Area: Round
"""
Round engine - the state machine of a single round.

This package handles:
- Stage progression (choosing → reading → preguessing → guessing → recap)
- Guess evaluation and point accounting
- Role swap when the next round begins
- Recap summaries
"""

from .enums import Stage, ActionType
from .actions import (
    Action,
    ChooseArticle,
    DoneReading,
    StartGuessing,
    Guess,
    NextRound,
    StopMatch,
)
from .state import RoundState, init_round
from .state_machine import RoundEngine, TRANSITIONS, can_transition, reduce
from .recap import build_recap

__all__ = [
    "Stage",
    "ActionType",
    "Action",
    "ChooseArticle",
    "DoneReading",
    "StartGuessing",
    "Guess",
    "NextRound",
    "StopMatch",
    "RoundState",
    "init_round",
    "RoundEngine",
    "TRANSITIONS",
    "can_transition",
    "reduce",
    "build_recap",
]
