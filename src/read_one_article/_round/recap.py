# Area: Round
"""
read_one_article._round.recap — Recap summary builder
=====================================================

Builds the summary shown once a round reaches the recap stage: who won,
which article the liar really read, links to both candidates and the
cumulative scores.
"""

from typing import Sequence

from ..types import ArticleCandidate, RecapSummary
from .enums import Stage
from .state import RoundState


def outcome_message(state: RoundState) -> str:
    title = state.chosen_article.title
    if state.guess_correct:
        return f"The investigator, {state.investigator} won! {state.liar} did read about {title}"
    return f"The liar, {state.liar} won! {state.liar} actually read about {title}"


def build_recap(state: RoundState, candidates: Sequence[ArticleCandidate]) -> RecapSummary:
    """
    Build the recap summary of a finished round.

    Raises:
        ValueError: If the round has not reached the recap stage
    """
    if state.stage != Stage.RECAP:
        raise ValueError(f"No recap available in stage '{state.stage.value}'")

    winner_role = "investigator" if state.guess_correct else "liar"
    return RecapSummary(
        round_number=state.round_number,
        winner=state.investigator if state.guess_correct else state.liar,
        winner_role=winner_role,
        message=outcome_message(state),
        chosen_title=state.chosen_article.title,
        articles=[{"title": c.title, "url": c.fullurl} for c in candidates],
        scores=[
            {"player": player, "score": state.score_of(player)}
            for player in (state.liar, state.investigator)
        ],
    )
