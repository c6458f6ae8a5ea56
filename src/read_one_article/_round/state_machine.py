# Area: Round
"""
read_one_article._round.state_machine — Round engine
====================================================

Implements the state machine that drives a single round from the
liar's article choice to the recap. Transitions are pure functions of
(state, action, candidates) looked up in a table keyed by stage and
action type. An action dispatched in the wrong stage raises
InvalidTransitionError and leaves the state untouched.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, Sequence, Tuple

from ..errors import InvalidPayloadError, InvalidTransitionError
from ..types import ArticleCandidate
from .actions import Action
from .enums import ActionType, Stage
from .scoring import resolve_guess
from .state import RoundState, init_round

logger = logging.getLogger("read_one_article.round.state_machine")

Candidates = Tuple[ArticleCandidate, ...]
Transition = Callable[[RoundState, Action, Candidates], RoundState]


def _require_member(state: RoundState, action: Action, candidates: Candidates) -> ArticleCandidate:
    candidate = action.candidate
    if not any(c.pageid == candidate.pageid for c in candidates):
        raise InvalidPayloadError(state.stage.value, action.type.value, candidate)
    return candidate


def _choose_article(state: RoundState, action: Action, candidates: Candidates) -> RoundState:
    candidate = _require_member(state, action, candidates)
    return replace(state, chosen_article=candidate, stage=Stage.READING)


def _done_reading(state: RoundState, action: Action, candidates: Candidates) -> RoundState:
    return replace(state, stage=Stage.PREGUESSING)


def _start_guessing(state: RoundState, action: Action, candidates: Candidates) -> RoundState:
    return replace(state, stage=Stage.GUESSING)


def _guess(state: RoundState, action: Action, candidates: Candidates) -> RoundState:
    candidate = _require_member(state, action, candidates)
    correct, points = resolve_guess(
        candidate, state.chosen_article, state.liar, state.investigator, state.points,
    )
    return replace(state, stage=Stage.RECAP, guess_correct=correct, points=points)


def _next_round(state: RoundState, action: Action, candidates: Candidates) -> RoundState:
    return init_round(
        liar=state.investigator,
        investigator=state.liar,
        points=state.points,
        round_number=state.round_number + 1,
    )


# Valid transitions: {current_stage: {action_type: transition}}
TRANSITIONS: Dict[Stage, Dict[ActionType, Transition]] = {
    Stage.CHOOSING: {
        ActionType.CHOOSE_ARTICLE: _choose_article,
    },
    Stage.READING: {
        ActionType.DONE_READING: _done_reading,
    },
    Stage.PREGUESSING: {
        ActionType.START_GUESSING: _start_guessing,
    },
    Stage.GUESSING: {
        ActionType.GUESS: _guess,
    },
    Stage.RECAP: {
        ActionType.NEXT_ROUND: _next_round,
    },
}


def can_transition(state: RoundState, action: Action) -> bool:
    """Check whether ``action`` is legal in the current stage of ``state``."""
    return action.type in TRANSITIONS.get(state.stage, {})


def reduce(state: RoundState, action: Action, candidates: Sequence[ArticleCandidate]) -> RoundState:
    """
    Compute the state that follows ``state`` after ``action``.

    Args:
        state: The current round state
        action: The action to apply
        candidates: The round's two candidate articles

    Returns:
        The new state. ``state`` itself is never modified.

    Raises:
        InvalidTransitionError: If the action is not legal in the current stage
        InvalidPayloadError: If the action names a candidate outside ``candidates``
    """
    if not can_transition(state, action):
        raise InvalidTransitionError(state.stage.value, action.type.value)
    transition = TRANSITIONS[state.stage][action.type]
    return transition(state, action, tuple(candidates))


class RoundEngine:
    """
    State machine for one round.

    Holds the round's candidate articles and its current state, and
    applies dispatched actions through ``reduce``.

    Attributes:
        candidates: The two candidate articles of this round
        state: The current round state
    """

    def __init__(self, state: RoundState, candidates: Sequence[ArticleCandidate]):
        """
        Initialize the engine for a round.

        Raises:
            ValueError: If ``candidates`` does not hold exactly two distinct
                articles, or ``state`` is not at the start of a round
        """
        candidates = tuple(candidates)
        if len(candidates) != 2 or candidates[0].pageid == candidates[1].pageid:
            raise ValueError(
                f"A round needs exactly two distinct candidates, got {len(candidates)}"
            )
        if state.stage != Stage.CHOOSING or state.chosen_article is not None:
            raise ValueError(f"A round must start in '{Stage.CHOOSING.value}', not '{state.stage.value}'")
        self.candidates: Candidates = candidates
        self.state = state

    @property
    def stage(self) -> Stage:
        return self.state.stage

    def can_dispatch(self, action: Action) -> bool:
        return can_transition(self.state, action)

    def dispatch(self, action: Action) -> RoundState:
        """
        Apply an action to the round.

        Returns:
            The new round state

        Raises:
            InvalidTransitionError: If the action is illegal in the current stage
        """
        try:
            new_state = reduce(self.state, action, self.candidates)
        except InvalidTransitionError as e:
            logger.warning(f"Round {self.state.round_number}: rejected {e}")
            raise
        logger.info(
            f"Round {self.state.round_number}: "
            f"{self.state.stage.value} → {new_state.stage.value} ({action.type.value})"
        )
        self.state = new_state
        return new_state
