# Area: Session
"""SessionController — runs a match of successive rounds between two players."""
import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

from .._config import GameConfig
from .._round.actions import Action
from .._round.enums import ActionType
from .._round.recap import build_recap
from .._round.state import RoundState, init_round
from .._round.state_machine import RoundEngine
from .._shared.wiki_source import DocumentSource
from ..errors import InvalidTransitionError, SetupFailureError
from ..types import ArticleCandidate, RecapSummary
from .fetch_guard import CandidateRequest, FetchGuard
from .players import validate_player_names

logger = logging.getLogger("read_one_article.session.controller")

IDLE = "idle"
LOADING = "loading"


def _new_fetch_executor() -> ThreadPoolExecutor:
    return ThreadPoolExecutor(max_workers=1, thread_name_prefix="candidate-fetch")


class SessionController:
    """
    Match-level lifecycle across rounds.

    A round exists in two steps: the controller first holds the pending
    state of the round (roles and carried points) while its candidates are
    being fetched, then builds a RoundEngine once two usable candidates
    arrive. Actions are forwarded to that engine; ``next round`` swaps the
    roles and goes back to fetching, ``stop`` tears the match down.
    """

    def __init__(
        self,
        source: DocumentSource,
        config: Optional[GameConfig] = None,
        executor: Optional[Executor] = None,
    ):
        self.source = source
        self.config = config or GameConfig()
        self._owns_executor = executor is None
        self._executor = executor or _new_fetch_executor()
        self._guard = FetchGuard()
        self._inflight: Optional[CandidateRequest] = None
        self.players: Optional[Tuple[str, str]] = None
        self.engine: Optional[RoundEngine] = None
        self._pending_state: Optional[RoundState] = None

    # ── Accessors ────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self.players is not None

    @property
    def awaiting_candidates(self) -> bool:
        return self.is_active and self.engine is None

    @property
    def state(self) -> Optional[RoundState]:
        if self.engine is not None:
            return self.engine.state
        return self._pending_state

    @property
    def candidates(self) -> Optional[Tuple[ArticleCandidate, ...]]:
        return self.engine.candidates if self.engine is not None else None

    @property
    def token(self) -> int:
        return self._guard.current

    def stage_name(self) -> str:
        if not self.is_active:
            return IDLE
        if self.engine is None:
            return LOADING
        return self.engine.stage.value

    def recap(self) -> RecapSummary:
        if self.engine is None:
            raise InvalidTransitionError(self.stage_name(), "recap")
        return build_recap(self.engine.state, self.engine.candidates)

    # ── Match lifecycle ──────────────────────────────────────

    def start(self, player_a: str, player_b: str) -> bool:
        """
        Start a new match; ``player_a`` reads first.

        Returns:
            False (and nothing is created) when the names are empty or equal
        """
        problems = validate_player_names(player_a, player_b)
        if problems:
            logger.warning(f"Match not started: {problems}")
            return False
        if self.is_active:
            logger.info("Match already running, stopping it before starting a new one")
            self.stop()

        player_a, player_b = player_a.strip(), player_b.strip()
        self.players = (player_a, player_b)
        self._pending_state = init_round(
            liar=player_a,
            investigator=player_b,
            points={player_a: 0, player_b: 0},
        )
        self._invalidate()
        logger.info(f"Match started: {player_a} vs {player_b}")
        return True

    def stop(self) -> None:
        """End the match from any stage and discard all round state."""
        if self.is_active:
            state = self.state
            logger.info(
                f"Match stopped after round {state.round_number}: {state.points_dict()}"
            )
        self._invalidate()
        self.players = None
        self.engine = None
        self._pending_state = None

    def _invalidate(self) -> None:
        """Make outstanding fetches stale and stop the one still in flight."""
        self._guard.invalidate()
        request, self._inflight = self._inflight, None
        if request is None or request.done():
            return
        if request.future.cancel():
            logger.info(f"Cancelled candidate fetch for round {request.round_number}")
        elif self._owns_executor:
            logger.warning(
                f"Candidate fetch for round {request.round_number} is still running, "
                "moving later fetches to a new worker"
            )
            self._executor.shutdown(wait=False)
            self._executor = _new_fetch_executor()

    def shutdown(self) -> None:
        self.stop()
        self._executor.shutdown(wait=False, cancel_futures=True)

    # ── Candidate fetch ──────────────────────────────────────

    def request_candidates(self) -> CandidateRequest:
        """
        Issue the candidate fetch for the pending round.

        Raises:
            InvalidTransitionError: If no round is waiting for candidates
        """
        if not self.awaiting_candidates:
            raise InvalidTransitionError(self.stage_name(), "request candidates")
        query = self.config.candidate_query()
        future = self._executor.submit(self.source.fetch, query)
        request = CandidateRequest(
            token=self._guard.current,
            round_number=self._pending_state.round_number,
            future=future,
        )
        self._inflight = request
        logger.info(f"Round {request.round_number}: fetching candidates (token {request.token})")
        return request

    def receive_candidates(self, request: CandidateRequest) -> bool:
        """
        Apply the result of a candidate fetch to the pending round.

        Returns:
            False when the request is stale and its result was discarded

        Raises:
            SetupFailureError: If the fetch failed or produced fewer than two
                usable candidates. No round engine is created.
        """
        if not self._guard.is_current(request.token) or not self.awaiting_candidates:
            logger.warning(
                f"Discarding stale candidates for round {request.round_number} "
                f"(token {request.token}, current {self._guard.current})"
            )
            request.future.cancel()
            return False

        if self._inflight is request:
            self._inflight = None
        try:
            candidates = request.future.result()
        except SetupFailureError:
            raise
        except Exception as e:
            raise SetupFailureError(f"Could not fetch articles: {e}") from e
        self.engine = self._build_engine(candidates)
        self._pending_state = None
        logger.info(
            f"Round {self.engine.state.round_number}: liar {self.engine.state.liar}, "
            f"investigator {self.engine.state.investigator}, "
            f"candidates {[c.title for c in self.engine.candidates]}"
        )
        return True

    def load_candidates(self) -> bool:
        """Fetch and apply candidates for the pending round, waiting for the result."""
        return self.receive_candidates(self.request_candidates())

    def _build_engine(self, candidates: Sequence[ArticleCandidate]) -> RoundEngine:
        usable: List[ArticleCandidate] = []
        for candidate in candidates:
            if all(candidate.pageid != c.pageid for c in usable):
                usable.append(candidate)
        if len(usable) < 2:
            raise SetupFailureError(
                f"Need 2 usable articles to start a round, got {len(usable)}",
                payload={"candidates": [c.model_dump() for c in usable]},
                problems=[
                    f"min_content_length={self.config.min_content_length}",
                    f"language={self.config.language}",
                ],
            )
        return RoundEngine(self._pending_state, usable[:2])

    # ── Actions ──────────────────────────────────────────────

    def dispatch(self, action: Action) -> Optional[RoundState]:
        """
        Forward an action to the active round.

        Returns:
            The new round state, or None after ``stop match``

        Raises:
            InvalidTransitionError: If the action is illegal right now
        """
        if action.type == ActionType.STOP_MATCH:
            self.stop()
            return None
        if self.engine is None:
            logger.warning(f"Rejected '{action.type.value}' while {self.stage_name()}")
            raise InvalidTransitionError(self.stage_name(), action.type.value)

        new_state = self.engine.dispatch(action)
        if action.type == ActionType.NEXT_ROUND:
            self.engine = None
            self._pending_state = new_state
            self._invalidate()
            logger.info(
                f"Round {new_state.round_number}: roles swapped, "
                f"{new_state.liar} reads, {new_state.investigator} investigates"
            )
        return new_state
