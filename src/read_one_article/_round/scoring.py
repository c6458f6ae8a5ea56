# Area: Round
"""
read_one_article._round.scoring — Guess resolution and point accounting
=======================================================================

Exactly one point is handed out per resolved guess: to the investigator
when they name the article the liar read, otherwise to the liar for
getting away with it. Draws are impossible.
"""

from typing import Mapping, Tuple

from ..types import ArticleCandidate
from .state import freeze_points


def is_same_article(guess: ArticleCandidate, chosen: ArticleCandidate) -> bool:
    """Compare candidates by page id, so duplicate titles stay distinguishable."""
    return guess.pageid == chosen.pageid


def award_point(points: Mapping[str, int], player: str) -> Mapping[str, int]:
    """Return a new read-only points mapping with one point added for ``player``."""
    updated = dict(points)
    updated[player] = updated.get(player, 0) + 1
    return freeze_points(updated)


def resolve_guess(
    guess: ArticleCandidate,
    chosen: ArticleCandidate,
    liar: str,
    investigator: str,
    points: Mapping[str, int],
) -> Tuple[bool, Mapping[str, int]]:
    """
    Evaluate a guess and update the score.

    Returns:
        (guess_correct, new_points)
    """
    correct = is_same_article(guess, chosen)
    winner = investigator if correct else liar
    return correct, award_point(points, winner)
