# Area: Round Tests
"""Tests for the round state machine."""

import pytest
from read_one_article._round.state_machine import RoundEngine, TRANSITIONS, can_transition, reduce
from read_one_article._round.state import init_round
from read_one_article._round.enums import Stage, ActionType
from read_one_article._round.actions import (
    ChooseArticle,
    DoneReading,
    StartGuessing,
    Guess,
    NextRound,
    StopMatch,
)
from read_one_article.errors import InvalidTransitionError, InvalidPayloadError
from read_one_article.types import ArticleCandidate


def make_article(pageid, title=None):
    return ArticleCandidate(
        pageid=pageid,
        title=title or f"Article {pageid}",
        length=20000,
        fullurl=f"https://en.wikipedia.org/wiki/Article_{pageid}",
    )


C1 = make_article(101, "Battle of Hastings")
C2 = make_article(202, "Axolotl")


def new_engine(liar="Amy", investigator="Bo", points=None):
    points = points or {liar: 0, investigator: 0}
    return RoundEngine(init_round(liar, investigator, points), [C1, C2])


def advance_to(engine, stage):
    """Drive the engine forward along the happy path up to ``stage``."""
    steps = [ChooseArticle(C1), DoneReading(), StartGuessing(), Guess(C2)]
    for action in steps:
        if engine.stage == stage:
            break
        engine.dispatch(action)
    assert engine.stage == stage
    return engine


class TestTransitionTable:
    """Tests for the TRANSITIONS table."""

    def test_every_stage_has_exactly_one_action(self):
        for stage in Stage:
            assert len(TRANSITIONS[stage]) == 1

    def test_stop_match_is_not_an_engine_transition(self):
        for transitions in TRANSITIONS.values():
            assert ActionType.STOP_MATCH not in transitions

    def test_stage_order(self):
        orders = [stage.order for stage in Stage]
        assert orders == sorted(orders)
        assert Stage.CHOOSING.order == 0
        assert Stage.RECAP.order == 4


class TestRoundEngineHappyPath:
    """Tests for the forward path through all stages."""

    def test_initial_stage_is_choosing(self):
        engine = new_engine()
        assert engine.stage == Stage.CHOOSING
        assert engine.state.chosen_article is None
        assert engine.state.guess_correct is False

    def test_choose_article_moves_to_reading(self):
        engine = new_engine()
        state = engine.dispatch(ChooseArticle(C1))
        assert state.stage == Stage.READING
        assert state.chosen_article == C1

    def test_done_reading_moves_to_preguessing(self):
        engine = advance_to(new_engine(), Stage.READING)
        assert engine.dispatch(DoneReading()).stage == Stage.PREGUESSING

    def test_start_guessing_moves_to_guessing(self):
        engine = advance_to(new_engine(), Stage.PREGUESSING)
        assert engine.dispatch(StartGuessing()).stage == Stage.GUESSING

    def test_stage_strictly_advances(self):
        """Each dispatched action moves exactly one stage forward."""
        engine = new_engine()
        actions = [ChooseArticle(C2), DoneReading(), StartGuessing(), Guess(C2)]
        previous = engine.stage.order
        for action in actions:
            state = engine.dispatch(action)
            assert state.stage.order == previous + 1
            previous = state.stage.order
        assert engine.stage == Stage.RECAP

    def test_chosen_article_present_after_choosing(self):
        engine = new_engine()
        for action in [ChooseArticle(C2), DoneReading(), StartGuessing(), Guess(C1)]:
            state = engine.dispatch(action)
            assert state.chosen_article == C2


class TestGuessResolution:
    """Tests for guess evaluation and scoring."""

    def test_wrong_guess_gives_point_to_liar(self):
        """Amy picks C1, Bo guesses C2: the liar wins."""
        engine = advance_to(new_engine(), Stage.GUESSING)
        state = engine.dispatch(Guess(C2))
        assert state.guess_correct is False
        assert dict(state.points) == {"Amy": 1, "Bo": 0}
        assert state.stage == Stage.RECAP

    def test_right_guess_gives_point_to_investigator(self):
        engine = advance_to(new_engine(), Stage.GUESSING)
        state = engine.dispatch(Guess(C1))
        assert state.guess_correct is True
        assert dict(state.points) == {"Amy": 0, "Bo": 1}

    def test_exactly_one_point_per_round(self):
        for guess in (C1, C2):
            engine = advance_to(new_engine(points={"Amy": 3, "Bo": 2}), Stage.GUESSING)
            state = engine.dispatch(Guess(guess))
            assert state.total_points == 6

    def test_guess_compares_page_id_not_title(self):
        """Two candidates with the same title are still told apart."""
        twin1 = make_article(1, "Mercury")
        twin2 = make_article(2, "Mercury")
        engine = RoundEngine(init_round("Amy", "Bo", {"Amy": 0, "Bo": 0}), [twin1, twin2])
        engine.dispatch(ChooseArticle(twin1))
        engine.dispatch(DoneReading())
        engine.dispatch(StartGuessing())
        state = engine.dispatch(Guess(twin2))
        assert state.guess_correct is False

    def test_equal_copy_of_chosen_candidate_counts_as_correct(self):
        engine = advance_to(new_engine(), Stage.GUESSING)
        state = engine.dispatch(Guess(make_article(101, "Battle of Hastings")))
        assert state.guess_correct is True

    def test_points_of_previous_state_untouched(self):
        engine = advance_to(new_engine(), Stage.GUESSING)
        before = engine.state
        engine.dispatch(Guess(C2))
        assert dict(before.points) == {"Amy": 0, "Bo": 0}


class TestNextRound:
    """Tests for the role swap at the start of the next round."""

    def test_next_round_swaps_roles(self):
        engine = advance_to(new_engine(), Stage.RECAP)
        state = engine.dispatch(NextRound())
        assert state.liar == "Bo"
        assert state.investigator == "Amy"

    def test_next_round_resets_round_fields(self):
        engine = advance_to(new_engine(), Stage.RECAP)
        state = engine.dispatch(NextRound())
        assert state.stage == Stage.CHOOSING
        assert state.chosen_article is None
        assert state.guess_correct is False
        assert state.round_number == 2

    def test_next_round_keeps_points(self):
        engine = advance_to(new_engine(), Stage.RECAP)
        points = dict(engine.state.points)
        state = engine.dispatch(NextRound())
        assert dict(state.points) == points == {"Amy": 1, "Bo": 0}

    def test_points_mapping_is_read_only(self):
        engine = advance_to(new_engine(), Stage.RECAP)
        with pytest.raises(TypeError):
            engine.state.points["Amy"] = 99


class TestInvalidTransitions:
    """Tests for actions dispatched in the wrong stage."""

    @pytest.mark.parametrize("stage", [Stage.CHOOSING, Stage.READING, Stage.PREGUESSING])
    def test_guess_before_guessing_is_rejected(self, stage):
        engine = advance_to(new_engine(), stage)
        before = engine.state
        with pytest.raises(InvalidTransitionError):
            engine.dispatch(Guess(C1))
        assert engine.state == before
        assert engine.state.stage == before.stage
        assert engine.state.chosen_article == before.chosen_article
        assert engine.state.guess_correct == before.guess_correct
        assert dict(engine.state.points) == dict(before.points)

    def test_choose_twice_is_rejected(self):
        engine = advance_to(new_engine(), Stage.READING)
        with pytest.raises(InvalidTransitionError):
            engine.dispatch(ChooseArticle(C2))
        assert engine.state.chosen_article == C1

    def test_start_guessing_cannot_skip_preguessing(self):
        engine = advance_to(new_engine(), Stage.READING)
        with pytest.raises(InvalidTransitionError):
            engine.dispatch(StartGuessing())

    def test_next_round_before_recap_is_rejected(self):
        engine = advance_to(new_engine(), Stage.GUESSING)
        with pytest.raises(InvalidTransitionError):
            engine.dispatch(NextRound())

    def test_stop_match_rejected_by_engine(self):
        engine = new_engine()
        with pytest.raises(InvalidTransitionError):
            engine.dispatch(StopMatch())

    def test_error_names_stage_and_action(self):
        engine = new_engine()
        with pytest.raises(InvalidTransitionError) as exc_info:
            engine.dispatch(DoneReading())
        assert exc_info.value.stage == "choosing"
        assert exc_info.value.action == "done reading"

    def test_can_dispatch(self):
        engine = new_engine()
        assert engine.can_dispatch(ChooseArticle(C1)) is True
        assert engine.can_dispatch(Guess(C1)) is False


class TestInvalidPayload:
    """Tests for candidates outside the round's set."""

    def test_choose_unknown_article_is_rejected(self):
        engine = new_engine()
        with pytest.raises(InvalidPayloadError):
            engine.dispatch(ChooseArticle(make_article(999)))
        assert engine.stage == Stage.CHOOSING
        assert engine.state.chosen_article is None

    def test_guess_unknown_article_is_rejected(self):
        engine = advance_to(new_engine(), Stage.GUESSING)
        before = engine.state
        with pytest.raises(InvalidPayloadError):
            engine.dispatch(Guess(make_article(999)))
        assert engine.state == before

    def test_invalid_payload_is_an_invalid_transition(self):
        engine = new_engine()
        with pytest.raises(InvalidTransitionError):
            engine.dispatch(ChooseArticle(make_article(999)))


class TestReduce:
    """Tests for the pure reduce function."""

    def test_reduce_does_not_modify_input(self):
        state = init_round("Amy", "Bo", {"Amy": 0, "Bo": 0})
        new_state = reduce(state, ChooseArticle(C1), [C1, C2])
        assert state.stage == Stage.CHOOSING
        assert state.chosen_article is None
        assert new_state.stage == Stage.READING

    def test_reduce_is_deterministic(self):
        state = init_round("Amy", "Bo", {"Amy": 0, "Bo": 0})
        assert reduce(state, ChooseArticle(C1), [C1, C2]) == reduce(state, ChooseArticle(C1), [C1, C2])

    def test_can_transition(self):
        state = init_round("Amy", "Bo", {"Amy": 0, "Bo": 0})
        assert can_transition(state, ChooseArticle(C1)) is True
        assert can_transition(state, NextRound()) is False


class TestRoundEngineSetup:
    """Tests for RoundEngine construction."""

    def test_requires_two_candidates(self):
        with pytest.raises(ValueError):
            RoundEngine(init_round("Amy", "Bo", {"Amy": 0, "Bo": 0}), [C1])

    def test_requires_distinct_candidates(self):
        with pytest.raises(ValueError):
            RoundEngine(init_round("Amy", "Bo", {"Amy": 0, "Bo": 0}), [C1, make_article(101)])

    def test_requires_choosing_stage(self):
        state = reduce(init_round("Amy", "Bo", {"Amy": 0, "Bo": 0}), ChooseArticle(C1), [C1, C2])
        with pytest.raises(ValueError):
            RoundEngine(state, [C1, C2])
