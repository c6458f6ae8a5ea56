"""
main.py — Drive a match from your own code
==========================================

This script plays one round between two players against live
Wikipedia, picking articles at random instead of asking anybody.
It shows the calls a front-end makes to the session controller.

    python examples/main.py

For the interactive terminal game run ``python -m read_one_article``.
"""

import logging
import random

from read_one_article import (
    ChooseArticle,
    DoneReading,
    GameConfig,
    Guess,
    SessionController,
    StartGuessing,
    StopMatch,
    WikipediaSource,
)

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)

# ── Configuration ──
config = GameConfig(
    language="en",
    min_content_length=10_000,
)

session = SessionController(source=WikipediaSource(batch_size=config.batch_size), config=config)
session.start("Amy", "Bo")
session.load_candidates()

session.dispatch(ChooseArticle(random.choice(session.candidates)))
session.dispatch(DoneReading())
session.dispatch(StartGuessing())
session.dispatch(Guess(random.choice(session.candidates)))

print(session.recap()["message"])
print(session.state.points_dict())

session.dispatch(StopMatch())
session.shutdown()
