"""
read_one_article — Read One Article, a two-player Wikipedia bluffing game
=========================================================================

One player (the liar) reads one of two random Wikipedia articles; the
other (the investigator) asks questions about both and guesses which one
was read. Roles swap every round and points carry over.

Quick Start:
    from read_one_article import SessionController, WikipediaSource
    session = SessionController(source=WikipediaSource())
    session.start("Amy", "Bo")
    session.load_candidates()
    session.dispatch(ChooseArticle(session.candidates[0]))

Or play in the terminal:
    python -m read_one_article
"""

from ._config import GameConfig, load_config
from ._round import (
    Stage,
    ActionType,
    Action,
    ChooseArticle,
    DoneReading,
    StartGuessing,
    Guess,
    NextRound,
    StopMatch,
    RoundState,
    RoundEngine,
    init_round,
    reduce,
    build_recap,
)
from ._session import SessionController, CandidateRequest, validate_player_names
from ._shared import ArticleRenderer, DocumentSource, WikipediaSource, setup_logging
from .errors import (
    ReadOneArticleError,
    InvalidTransitionError,
    InvalidPayloadError,
    SetupFailureError,
    RenderError,
)
from .types import ArticleCandidate, CandidateQuery, RecapSummary

__all__ = [
    # Main classes
    "SessionController",
    "RoundEngine",
    "WikipediaSource",
    "DocumentSource",
    "ArticleRenderer",
    "GameConfig",
    "load_config",
    "setup_logging",
    # Round state and actions
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
    "reduce",
    "build_recap",
    "CandidateRequest",
    "validate_player_names",
    # Errors
    "ReadOneArticleError",
    "InvalidTransitionError",
    "InvalidPayloadError",
    "SetupFailureError",
    "RenderError",
    # Types
    "ArticleCandidate",
    "CandidateQuery",
    "RecapSummary",
]
__version__ = "1.0.0"
