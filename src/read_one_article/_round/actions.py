# Area: Round
"""
read_one_article._round.actions — Dispatchable actions
======================================================

Each action is a frozen dataclass carrying its ActionType, so the
engine can look up the matching transition by (stage, action.type).
"""

from dataclasses import dataclass, field
from typing import Union

from ..types import ArticleCandidate
from .enums import ActionType


@dataclass(frozen=True)
class ChooseArticle:
    """The liar picks the article they are going to read."""
    candidate: ArticleCandidate
    type: ActionType = field(default=ActionType.CHOOSE_ARTICLE, init=False)


@dataclass(frozen=True)
class DoneReading:
    type: ActionType = field(default=ActionType.DONE_READING, init=False)


@dataclass(frozen=True)
class StartGuessing:
    type: ActionType = field(default=ActionType.START_GUESSING, init=False)


@dataclass(frozen=True)
class Guess:
    """The investigator names the article they believe was read."""
    candidate: ArticleCandidate
    type: ActionType = field(default=ActionType.GUESS, init=False)


@dataclass(frozen=True)
class NextRound:
    type: ActionType = field(default=ActionType.NEXT_ROUND, init=False)


@dataclass(frozen=True)
class StopMatch:
    type: ActionType = field(default=ActionType.STOP_MATCH, init=False)


Action = Union[ChooseArticle, DoneReading, StartGuessing, Guess, NextRound, StopMatch]
