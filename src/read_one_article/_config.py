# Area: Shared
"""
read_one_article._config — Game configuration
=============================================

Configuration values, defaults and validation. Values come from an
optional JSON file and are overridden by environment variables (a
``.env`` file is honoured by the CLI through python-dotenv).
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .types import CandidateQuery

logger = logging.getLogger("read_one_article")

# Environment variable -> config key
ENV_MAPPINGS = {
    "READ_ONE_ARTICLE_LANGUAGE": "language",
    "READ_ONE_ARTICLE_MIN_CONTENT_LENGTH": "min_content_length",
    "READ_ONE_ARTICLE_BATCH_SIZE": "batch_size",
    "READ_ONE_ARTICLE_LOG_FILE": "log_file",
}

INT_KEYS = {"min_content_length", "candidate_count", "batch_size"}


@dataclass
class GameConfig:
    """Settings of one game client."""
    language: str = "en"
    min_content_length: int = 10_000
    candidate_count: int = 2
    batch_size: int = 50
    excluded_title_prefixes: Tuple[str, ...] = ("List of",)
    log_file: str = "read_one_article.log"
    open_browser: bool = True

    def candidate_query(self) -> CandidateQuery:
        return CandidateQuery(
            min_content_length=self.min_content_length,
            count=self.candidate_count,
            language=self.language,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def validate_config(config: GameConfig) -> None:
    """
    Validate configuration values.

    Raises:
        ValueError: If a value is out of range
    """
    problems = []
    if not config.language or not config.language.replace("-", "").isalnum():
        problems.append(f"language must be a wiki language code, got {config.language!r}")
    if config.min_content_length < 0:
        problems.append("min_content_length must be >= 0")
    if config.candidate_count != 2:
        problems.append("candidate_count must be 2")
    if not 1 <= config.batch_size <= 500:
        problems.append("batch_size must be between 1 and 500")
    prefixes = config.excluded_title_prefixes
    if not isinstance(prefixes, tuple) or not all(isinstance(p, str) and p for p in prefixes):
        problems.append("excluded_title_prefixes must be a list of non-empty strings")
    if problems:
        raise ValueError(f"Invalid configuration: {problems}")


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load config from file, then override with environment variables."""
    values: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                values = json.load(f)
        else:
            logger.warning(f"Config file not found: {config_path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[config_key] = os.environ[env_key]

    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {unknown}")

    kwargs: Dict[str, Any] = {}
    for key in known & set(values):
        value = values[key]
        if key in INT_KEYS:
            value = int(value)
        elif key == "excluded_title_prefixes" and isinstance(value, str):
            value = (value,)
        elif key == "excluded_title_prefixes" and isinstance(value, list):
            value = tuple(value)
        kwargs[key] = value

    config = GameConfig(**kwargs)
    validate_config(config)
    return config
