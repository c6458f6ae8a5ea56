# Area: Shared
"""
Shared utilities used by the session and the CLI.

This package contains:
- Logging configuration
- The Wikipedia random article source
- The isolated article renderer
"""

from .logging_config import (
    setup_logging,
    log_game_error,
    mute_terminal,
    unmute_terminal,
    is_terminal_muted,
)
from .wiki_source import (
    DocumentSource,
    WikipediaSource,
    select_candidates,
    build_random_query_params,
)
from .renderer import ArticleRenderer, suppress_outbound_links

__all__ = [
    "setup_logging",
    "log_game_error",
    "mute_terminal",
    "unmute_terminal",
    "is_terminal_muted",
    "DocumentSource",
    "WikipediaSource",
    "select_candidates",
    "build_random_query_params",
    "ArticleRenderer",
    "suppress_outbound_links",
]
