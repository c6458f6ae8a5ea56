# Area: Round
"""
read_one_article._round.state — Round state value
=================================================

Tracks one round between the liar and the investigator: the current
stage, the article the liar picked, the outcome of the guess and the
cumulative points carried over from earlier rounds.

RoundState is immutable. Every transition produces a new value; the
points mapping is copied whenever it changes and exposed read-only.
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..types import ArticleCandidate
from .enums import Stage


def freeze_points(points: Mapping[str, int]) -> Mapping[str, int]:
    """Return a read-only copy of a points mapping."""
    return MappingProxyType(dict(points))


@dataclass(frozen=True)
class RoundState:
    """
    Full state of one round.

    Attributes:
        liar: Player reading one of the two candidates this round
        investigator: Player trying to find out which candidate was read
        points: Cumulative score per player for the whole match
        stage: Current stage of the round
        chosen_article: Candidate picked by the liar, None while choosing
        guess_correct: Whether the investigator guessed right (set in recap)
        round_number: 1-based round counter within the match
    """

    liar: str
    investigator: str
    points: Mapping[str, int]
    stage: Stage = Stage.CHOOSING
    chosen_article: Optional[ArticleCandidate] = None
    guess_correct: bool = False
    round_number: int = 1

    @property
    def total_points(self) -> int:
        return sum(self.points.values())

    def score_of(self, player: str) -> int:
        return self.points.get(player, 0)

    def points_dict(self) -> Dict[str, int]:
        """Plain mutable copy of the points, for display and serialisation."""
        return dict(self.points)

    def to_dict(self) -> Dict[str, object]:
        return {
            "liar": self.liar,
            "investigator": self.investigator,
            "points": self.points_dict(),
            "stage": self.stage.value,
            "chosen_article": self.chosen_article.model_dump() if self.chosen_article else None,
            "guess_correct": self.guess_correct,
            "round_number": self.round_number,
        }


def init_round(
    liar: str,
    investigator: str,
    points: Mapping[str, int],
    round_number: int = 1,
) -> RoundState:
    """
    Create the state of a fresh round in the CHOOSING stage.

    Args:
        liar: Player who will read this round
        investigator: Player who will guess this round
        points: Points carried over from earlier rounds
        round_number: 1-based number of the new round

    Returns:
        A RoundState with no chosen article and guess_correct False

    Raises:
        ValueError: If both roles are given to the same player, or a
            player has no entry in ``points``
    """
    if liar == investigator:
        raise ValueError(f"Liar and investigator must differ, both are '{liar}'")
    missing = [p for p in (liar, investigator) if p not in points]
    if missing:
        raise ValueError(f"No points entry for players: {missing}")
    return RoundState(
        liar=liar,
        investigator=investigator,
        points=freeze_points(points),
        round_number=round_number,
    )
