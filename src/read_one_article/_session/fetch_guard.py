# Area: Session
"""
read_one_article._session.fetch_guard — Stale fetch protection
==============================================================

Every candidate fetch is tagged with the generation that was current
when it was issued. Starting the next round or stopping the match bumps
the generation, so a fetch that resolves afterwards is recognised as
stale and its result is discarded instead of being applied to a newer
round. Nothing is ever cancelled by blocking.
"""

from concurrent.futures import Future
from dataclasses import dataclass
from typing import List

from ..types import ArticleCandidate


@dataclass(frozen=True)
class CandidateRequest:
    """An in-flight candidate fetch and the generation it belongs to."""
    token: int
    round_number: int
    future: "Future[List[ArticleCandidate]]"

    def done(self) -> bool:
        return self.future.done()


class FetchGuard:
    """Monotonic generation counter."""

    def __init__(self):
        self._generation = 0

    @property
    def current(self) -> int:
        return self._generation

    def invalidate(self) -> int:
        """Start a new generation; every earlier token becomes stale."""
        self._generation += 1
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation
