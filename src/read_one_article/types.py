"""
read_one_article.types — Data contracts shared by the engine and its collaborators
===================================================================================

ArticleCandidate is the descriptor of one reference article as returned by
the encyclopedia query endpoint. It is parsed with pydantic so that pages of
an unexpected shape are rejected at the boundary, before any round exists.

    >>> ArticleCandidate.model_validate(
    ...     {"pageid": 1, "title": "Ada", "length": 12000,
    ...      "fullurl": "https://en.wikipedia.org/wiki/Ada", "ns": 0}
    ... )
    ArticleCandidate(pageid=1, title='Ada', length=12000, fullurl='https://en.wikipedia.org/wiki/Ada')
"""

from dataclasses import dataclass
from typing import Dict, TypedDict, List

from pydantic import BaseModel, ConfigDict, Field


class ArticleCandidate(BaseModel):
    """One of the two reference articles presented in a round.

    Fields
    ------
    pageid : int
        Stable identifier of the page. Used as the candidate's identity.
    title : str
        Page title, e.g. "Battle of Hastings".
    length : int
        Body length of the page in bytes.
    fullurl : str
        Canonical URL of the page.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    pageid: int
    title: str
    length: int = Field(ge=0)
    fullurl: str


@dataclass(frozen=True)
class CandidateQuery:
    """Parameters of one request to the document source."""
    min_content_length: int
    count: int
    language: str


class ScoreLine(TypedDict):
    """One player's entry on the recap scoreboard."""
    player: str
    score: int


class RecapSummary(TypedDict):
    """Everything the recap screen shows once a guess has been resolved.

    Fields
    ------
    round_number : int
        The round that just ended (1, 2, 3, ...).
    winner : str
        Name of the player who earned the point.
    winner_role : str
        "investigator" or "liar".
    message : str
        Human readable outcome line.
    chosen_title : str
        Title of the article the liar actually read.
    articles : List[Dict[str, str]]
        Both candidates as {"title", "url"} pairs, in presentation order.
    scores : List[ScoreLine]
        Cumulative scores, liar first.
    """
    round_number: int
    winner: str
    winner_role: str
    message: str
    chosen_title: str
    articles: List[Dict[str, str]]
    scores: List[ScoreLine]
