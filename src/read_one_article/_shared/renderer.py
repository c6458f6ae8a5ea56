# Area: Shared
"""
read_one_article._shared.renderer — Isolated article view
=========================================================

Fetches the rendered body of the liar's chosen article and wraps it in a
standalone HTML page. All outbound links are disabled so the reader
cannot wander off; same-page anchors (``href="#..."``) keep working.
The page has no ``<base>`` element: media URLs are made absolute instead,
so anchors resolve against the local file.
"""

from __future__ import annotations
import html
import logging
import re
from pathlib import Path
from typing import Optional

import requests

from ..errors import RenderError
from ..types import ArticleCandidate
from .wiki_source import API_URL, USER_AGENT

logger = logging.getLogger("read_one_article.shared.renderer")

SITE_SUB = "From Wikipedia, the free encyclopedia"

STYLESHEET = """
body {
  font-family: sans-serif;
  color: #202122;
  max-width: 60em;
  margin: 0 auto;
  padding: 1em;
  line-height: 1.6;
}
h1 {
  font-family: 'Linux Libertine', Georgia, Times, serif;
  font-weight: normal;
  border-bottom: 1px solid #a2a9b1;
  margin-bottom: 0.25em;
}
.siteSub { font-size: 0.85em; color: #54595d; margin-bottom: 1em; }
a { color: #0645ad; text-decoration: none; }
a:not([href]) { color: inherit; cursor: text; }
img { max-width: 100%; height: auto; }
table { border-collapse: collapse; }
.mw-editsection, .navbox, .noprint { display: none; }
"""

_HREF_RE = re.compile(
    r"""(<a\b[^>]*?)\shref\s*=\s*(?:"([^"]*)"|'([^']*)')""",
    re.IGNORECASE,
)


def suppress_outbound_links(body: str) -> str:
    """Drop the href of every link that is not a same-page anchor."""

    def _replace(match: re.Match) -> str:
        target = match.group(2) if match.group(2) is not None else match.group(3)
        if target.startswith("#"):
            return match.group(0)
        disabled = target.replace('"', "&quot;")
        return f'{match.group(1)} data-disabled-href="{disabled}"'

    return _HREF_RE.sub(_replace, body)


_SRC_RE = re.compile(
    r"""(\s(?:src|srcset)\s*=\s*)(?:"([^"]*)"|'([^']*)')""",
    re.IGNORECASE,
)


def absolute_url(url: str, origin: str) -> str:
    if url.startswith("//"):
        return "https:" + url
    if url.startswith("/"):
        return origin + url
    return url


def absolutize_media(body: str, origin: str) -> str:
    """Point relative ``src`` and ``srcset`` URLs at ``origin``."""

    def _replace(match: re.Match) -> str:
        value = match.group(2) if match.group(2) is not None else match.group(3)
        if match.group(1).strip().lower().startswith("srcset"):
            items = []
            for item in value.split(","):
                parts = item.strip().split(None, 1)
                if parts:
                    parts[0] = absolute_url(parts[0], origin)
                items.append(" ".join(parts))
            value = ", ".join(items)
        else:
            value = absolute_url(value, origin)
        value = value.replace('"', "&quot;")
        return f'{match.group(1)}"{value}"'

    return _SRC_RE.sub(_replace, body)


def build_parse_params(pageid: int) -> dict:
    return {
        "format": "json",
        "action": "parse",
        "pageid": pageid,
        "mobileformat": "true",
        "prop": "text",
        "origin": "*",
    }


class ArticleRenderer:
    """Fetches and renders one candidate article for the reading stage."""

    def __init__(self, language: str = "en", session: Optional[requests.Session] = None):
        self.language = language
        self.session = session or requests.Session()

    @property
    def origin(self) -> str:
        return f"https://{self.language}.wikipedia.org"

    def fetch_body(self, article: ArticleCandidate) -> str:
        """
        Fetch the rendered HTML body of ``article``.

        Raises:
            RenderError: If the request fails or the response has no
                ``parse.text["*"]``
        """
        url = API_URL.format(language=self.language)
        try:
            response = self.session.get(
                url,
                params=build_parse_params(article.pageid),
                headers={"User-Agent": USER_AGENT},
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise RenderError(article.pageid, str(e)) from e
        except ValueError as e:
            raise RenderError(article.pageid, f"response is not valid JSON: {e}") from e

        try:
            return data["parse"]["text"]["*"]
        except (KeyError, TypeError) as e:
            raise RenderError(article.pageid, f"unexpected response shape, missing {e}") from e

    def render(self, article: ArticleCandidate, body: str) -> str:
        """Wrap an article body in a standalone, navigation-free HTML page."""
        title = html.escape(article.title)
        return (
            "<!DOCTYPE html>\n"
            "<html>\n<head>\n"
            '<meta charset="utf-8" />\n'
            f"<title>Wikipedia page for {title}</title>\n"
            f"<style>{STYLESHEET}</style>\n"
            "</head>\n<body>\n"
            f"<h1>{title}</h1>\n"
            f'<div class="siteSub">{SITE_SUB}</div>\n'
            f"{suppress_outbound_links(absolutize_media(body, self.origin))}\n"
            "</body>\n</html>\n"
        )

    def write(self, article: ArticleCandidate, directory: Path) -> Path:
        """Fetch, render and store ``article`` as ``<pageid>.html`` in ``directory``."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{article.pageid}.html"
        path.write_text(self.render(article, self.fetch_body(article)), encoding="utf-8")
        logger.info(f"Rendered '{article.title}' to {path}")
        return path
