# Area: Shared
"""
read_one_article.cli — Command-line interface
=============================================

Terminal client for two players sharing one screen.

Usage:
    python -m read_one_article                     # English Wikipedia
    python -m read_one_article --language de       # German Wikipedia
    python -m read_one_article --config game.json  # Settings from file

Settings can also come from environment variables (or a ``.env`` file):
    READ_ONE_ARTICLE_LANGUAGE, READ_ONE_ARTICLE_MIN_CONTENT_LENGTH,
    READ_ONE_ARTICLE_BATCH_SIZE, READ_ONE_ARTICLE_LOG_FILE
"""

import argparse
import sys
import tempfile
import webbrowser
from pathlib import Path
from typing import Callable, Dict

from dotenv import load_dotenv

from ._config import GameConfig, load_config, validate_config
from ._round.actions import ChooseArticle, DoneReading, Guess, NextRound, StartGuessing, StopMatch
from ._round.enums import Stage
from ._session.controller import SessionController
from ._session.players import validate_player_names
from ._shared.logging_config import log_game_error, mute_terminal, setup_logging, unmute_terminal
from ._shared.renderer import ArticleRenderer
from ._shared.wiki_source import WikipediaSource
from .errors import ReadOneArticleError, RenderError, SetupFailureError

INTRO = """\
Read One Article
================
In this game, there are two roles: the investigator and liar. Every round
you will swap between those roles. The liar will be presented with two
random Wikipedia pages. They will only be able to read one of those.

Then the investigator will see the titles of both pages, and given the
opportunity to ask any questions about both.

Will the investigator find out which page the liar made up?

This game was inspired by "Two Of These People Are Lying" by Tom Scott
and Matt Gray.
"""


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Read One Article - a two-player Wikipedia bluffing game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m read_one_article
  python -m read_one_article --language fr
  python -m read_one_article --config game.json --no-browser
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--language", type=str, help="Wikipedia language code (default: en)")
    parser.add_argument("--log-file", type=str, help="Path to the JSON log file")
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open articles in a browser, only print the file path",
    )
    return parser.parse_args(argv)


class GameCLI:
    """
    Interactive terminal front-end of a match.

    Each round stage has one screen; the screen reads the players' input
    and dispatches the matching action into the session controller.
    """

    def __init__(
        self,
        controller: SessionController,
        renderer: ArticleRenderer,
        reading_dir: Path,
        open_browser: bool = True,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.controller = controller
        self.renderer = renderer
        self.reading_dir = Path(reading_dir)
        self.open_browser = open_browser
        self.input = input_fn
        self.output = output_fn
        self.screens: Dict[Stage, Callable[[], None]] = {
            Stage.CHOOSING: self.show_choosing,
            Stage.READING: self.show_reading,
            Stage.PREGUESSING: self.show_preguessing,
            Stage.GUESSING: self.show_guessing,
            Stage.RECAP: self.show_recap,
        }

    # ── Top level ────────────────────────────────────────────

    def run(self) -> int:
        self.output(INTRO)
        try:
            while True:
                if not self.ask_names():
                    return 0
                self.play_match()
                if not self.ask_yes_no("Start a new match? [y/N] "):
                    return 0
        except (EOFError, KeyboardInterrupt):
            self.output("")
            self.controller.stop()
            return 0

    def ask_names(self) -> bool:
        """Name-entry form. Returns False if the players leave without starting."""
        while True:
            player_one = self.input("Player one: ")
            player_two = self.input("Player two: ")
            problems = validate_player_names(player_one, player_two)
            if problems:
                for problem in problems:
                    self.output(f"  {problem}")
                continue
            return self.controller.start(player_one, player_two)

    def play_match(self) -> None:
        mute_terminal()
        try:
            while self.controller.is_active:
                if self.controller.awaiting_candidates:
                    self.load_round()
                    continue
                self.screens[self.controller.engine.stage]()
        finally:
            unmute_terminal()

    def load_round(self) -> None:
        self.output("loading…")
        try:
            self.controller.load_candidates()
        except SetupFailureError as e:
            log_game_error(e)
            self.output(f"Error: {e}")
            if not self.ask_yes_no("Try again? [y/N] "):
                self.controller.dispatch(StopMatch())

    # ── Stage screens ────────────────────────────────────────

    def show_choosing(self) -> None:
        state = self.controller.state
        self.output(
            f"\nIt is now the turn of the liar ({state.liar}). To read up on one "
            "topic, please pick one of these articles:"
        )
        candidates = self.controller.candidates
        for i in range(len(candidates)):
            self.output(f"  {i + 1}. Article {i + 1}")
        index = self.ask_choice(len(candidates))
        self.controller.dispatch(ChooseArticle(candidates[index]))

    def show_reading(self) -> None:
        article = self.controller.state.chosen_article
        try:
            path = self.renderer.write(article, self.reading_dir)
        except RenderError as e:
            log_game_error(e)
            self.output(f"Error: {e}")
            self.output(f"You can read it at {article.fullurl}")
        else:
            if self.open_browser:
                webbrowser.open(path.as_uri())
            self.output(f"\nReading '{article.title}': {path}")
        self.input("Press Enter when you're done reading ")
        self.controller.dispatch(DoneReading())

    def show_preguessing(self) -> None:
        self.input("\nPress Enter to start guessing ")
        self.controller.dispatch(StartGuessing())

    def show_guessing(self) -> None:
        state = self.controller.state
        self.output(
            f"\nIt is now the turn of the investigator ({state.investigator}). You now "
            "can ask questions about all these articles. Once you think you know "
            "which article the person read, make a guess!"
        )
        candidates = self.controller.candidates
        for i, article in enumerate(candidates):
            self.output(f"  {i + 1}. {article.title}")
        index = self.ask_choice(len(candidates))
        self.controller.dispatch(Guess(candidates[index]))

    def show_recap(self) -> None:
        recap = self.controller.recap()
        self.output(f"\n{recap['message']}")
        self.output("read the articles:")
        for article in recap["articles"]:
            self.output(f"  {article['title']}: {article['url']}")
        self.output("scores:")
        for line in recap["scores"]:
            self.output(f"  {line['player']}: {line['score']}")
        self.output("  1. start next round")
        self.output("  2. stop playing")
        if self.ask_choice(2) == 0:
            self.controller.dispatch(NextRound())
        else:
            self.controller.dispatch(StopMatch())

    # ── Prompts ──────────────────────────────────────────────

    def ask_choice(self, count: int) -> int:
        """Ask for a number between 1 and ``count``; returns a 0-based index."""
        while True:
            answer = self.input(f"Choose 1-{count}: ").strip()
            if answer.isdigit() and 1 <= int(answer) <= count:
                return int(answer) - 1
            self.output(f"  Please enter a number between 1 and {count}")

    def ask_yes_no(self, prompt: str) -> bool:
        return self.input(prompt).strip().lower() in ("y", "yes")


def build_config(args: argparse.Namespace) -> GameConfig:
    config = load_config(args.config)
    if args.language:
        config.language = args.language
    if args.log_file:
        config.log_file = args.log_file
    if args.no_browser:
        config.open_browser = False
    validate_config(config)
    return config


def main(argv=None) -> int:
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(log_file_path=config.log_file)
    source = WikipediaSource(
        batch_size=config.batch_size,
        excluded_prefixes=config.excluded_title_prefixes,
    )
    controller = SessionController(source=source, config=config)
    renderer = ArticleRenderer(language=config.language)

    with tempfile.TemporaryDirectory(prefix="read-one-article-") as reading_dir:
        cli = GameCLI(controller, renderer, Path(reading_dir), open_browser=config.open_browser)
        try:
            return cli.run()
        except ReadOneArticleError as e:
            log_game_error(e)
            return 1
        finally:
            controller.shutdown()
