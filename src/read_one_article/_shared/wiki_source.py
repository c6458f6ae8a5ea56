# Area: Shared
"""
read_one_article._shared.wiki_source — Random article source
============================================================

Queries the MediaWiki API of a Wikipedia language edition for a batch of
random main-namespace pages and keeps the long enough ones.

Request shape::

    GET https://{language}.wikipedia.org/w/api.php
        ?format=json&action=query&generator=random&prop=info&inprop=url
        &grnlimit=50&grnnamespace=0&origin=*

Every failure (network error, HTTP error status, body that is not JSON or
has no ``query.pages``, page that does not validate) is reported as a
SetupFailureError. No retry is attempted.
"""

from __future__ import annotations
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence

import requests
from pydantic import ValidationError

from ..errors import SetupFailureError
from ..types import ArticleCandidate, CandidateQuery

logger = logging.getLogger("read_one_article.shared.wiki_source")

API_URL = "https://{language}.wikipedia.org/w/api.php"
USER_AGENT = "read-one-article/1.0 (two-player party game)"
DEFAULT_BATCH_SIZE = 50
DEFAULT_EXCLUDED_PREFIXES = ("List of",)


class DocumentSource(ABC):
    """
    Abstract source of candidate articles.

    ``fetch`` must return up to ``query.count`` distinct candidates whose
    length is strictly greater than ``query.min_content_length``, or raise
    SetupFailureError.
    """

    @abstractmethod
    def fetch(self, query: CandidateQuery) -> List[ArticleCandidate]:
        ...


def build_random_query_params(batch_size: int = DEFAULT_BATCH_SIZE) -> Dict[str, Any]:
    return {
        "format": "json",
        "action": "query",
        "generator": "random",
        "prop": "info",
        "inprop": "url",
        "grnlimit": batch_size,
        "grnnamespace": 0,
        "origin": "*",
    }


def select_candidates(
    data: Any,
    query: CandidateQuery,
    excluded_prefixes: Iterable[str] = DEFAULT_EXCLUDED_PREFIXES,
) -> List[ArticleCandidate]:
    """
    Turn a ``generator=random`` response into candidate descriptors.

    Pages are kept in response order when their length exceeds
    ``query.min_content_length`` and their title does not start with one
    of ``excluded_prefixes``. Duplicate page ids are dropped and the result
    is cut to ``query.count`` entries.

    Raises:
        SetupFailureError: If the response does not hold ``query.pages`` or
            a page does not validate as an ArticleCandidate
    """
    result = data.get("query") if isinstance(data, dict) else None
    pages = result.get("pages") if isinstance(result, dict) else None
    if not isinstance(pages, dict) or not pages:
        raise SetupFailureError(
            "data doesn't fit expected format: " + json.dumps(data, default=str),
            payload=data if isinstance(data, dict) else {"raw": repr(data)},
        )

    prefixes = tuple(excluded_prefixes)
    selected: List[ArticleCandidate] = []
    seen = set()
    for raw_page in pages.values():
        try:
            page = ArticleCandidate.model_validate(raw_page)
        except ValidationError as e:
            raise SetupFailureError(
                "data doesn't fit expected format: invalid page entry",
                payload={"page": raw_page},
                problems=[
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ],
            ) from e
        if page.length <= query.min_content_length:
            continue
        if prefixes and page.title.startswith(prefixes):
            continue
        if page.pageid in seen:
            continue
        seen.add(page.pageid)
        selected.append(page)
        if len(selected) >= query.count:
            break
    return selected


class WikipediaSource(DocumentSource):
    """Random article source backed by the Wikipedia query API."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        excluded_prefixes: Sequence[str] = DEFAULT_EXCLUDED_PREFIXES,
    ):
        self.session = session or requests.Session()
        self.batch_size = batch_size
        self.excluded_prefixes = tuple(excluded_prefixes)

    def fetch(self, query: CandidateQuery) -> List[ArticleCandidate]:
        url = API_URL.format(language=query.language)
        logger.info(f"Requesting {self.batch_size} random pages from {url}")
        try:
            response = self.session.get(
                url,
                params=build_random_query_params(self.batch_size),
                headers={"User-Agent": USER_AGENT},
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise SetupFailureError(f"Could not fetch random articles: {e}") from e
        except ValueError as e:
            raise SetupFailureError(f"Response is not valid JSON: {e}") from e

        candidates = select_candidates(data, query, self.excluded_prefixes)
        logger.info(
            f"Selected {len(candidates)} of {len(data['query']['pages'])} pages "
            f"longer than {query.min_content_length}"
        )
        return candidates
