# Area: Round
"""
read_one_article._round.enums — Round Stage and Action Enums
============================================================

Defines the stages of a single round and the kinds of action that can
be dispatched into the round engine.
"""

from enum import Enum


class Stage(Enum):
    """
    Stages of one round, in their fixed forward order.

    Stage transitions:
    CHOOSING -> READING (on CHOOSE_ARTICLE)
    READING -> PREGUESSING (on DONE_READING)
    PREGUESSING -> GUESSING (on START_GUESSING)
    GUESSING -> RECAP (on GUESS)
    RECAP -> CHOOSING of a fresh round (on NEXT_ROUND)
    """
    CHOOSING = "choosing"
    READING = "reading"
    PREGUESSING = "preguessing"
    GUESSING = "guessing"
    RECAP = "recap"

    @property
    def order(self) -> int:
        return _STAGE_ORDER.index(self)


_STAGE_ORDER = [
    Stage.CHOOSING,
    Stage.READING,
    Stage.PREGUESSING,
    Stage.GUESSING,
    Stage.RECAP,
]


class ActionType(Enum):
    """
    Kinds of user action.

    Actions are triggered by:
    - CHOOSE_ARTICLE: the liar picks one of the two candidates
    - DONE_READING: the liar closes the article
    - START_GUESSING: either player opens the Q&A window
    - GUESS: the investigator names the article they think was read
    - NEXT_ROUND: either player continues from the recap
    - STOP_MATCH: either player ends the match (handled by the session)
    """
    CHOOSE_ARTICLE = "choose article"
    DONE_READING = "done reading"
    START_GUESSING = "start guessing"
    GUESS = "guess"
    NEXT_ROUND = "next round"
    STOP_MATCH = "stop match"
