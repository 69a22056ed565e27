import pytest
from wordletips.engine import score
from wordletips.session import Outcome, Phase, Reporter, RoundController, SessionConfig
from wordletips.solvers import BaseSolver

WORDS = ["crane", "raise", "stare", "trace", "cared", "slate", "adieu", "alone"]


class Recorder(Reporter):
    def __init__(self):
        self.events = []

    def on_start(self, pool_size):
        self.events.append(("start", pool_size))

    def on_guess(self, number, pool_size, guess):
        self.events.append(("guess", number, pool_size, guess))

    def on_malformed(self, response, expected_length):
        self.events.append(("malformed", response))

    def on_empty_pool(self):
        self.events.append(("empty",))

    def on_solved(self, guess, rounds):
        self.events.append(("solved", guess, rounds))


def test_solves_against_reference_scorer():
    rec = Recorder()
    c = RoundController(WORDS, lambda g: score(g, "alone"), reporter=rec)
    result = c.run()
    assert result.outcome is Outcome.SOLVED and result.success
    assert result.history[-1].guess == "alone"
    assert result.rounds <= 6
    assert c.phase is Phase.DONE
    assert rec.events[0] == ("start", len(WORDS))
    assert rec.events[-1] == ("solved", "alone", result.rounds)


def test_stops_at_round_cap():
    # unrecognized symbols carry no information, so the pool never shrinks
    asked = []
    c = RoundController(WORDS, lambda g: asked.append(g) or "?????")
    result = c.run()
    assert result.outcome is Outcome.EXHAUSTED
    assert result.rounds == 6 and len(asked) == 6
    assert len(set(asked)) == 1
    assert result.candidates == WORDS


def test_round_cap_is_configurable():
    c = RoundController(WORDS, lambda g: "?????", config=SessionConfig(max_rounds=2))
    assert c.run().rounds == 2


def test_empty_pool_ends_session():
    rec = Recorder()
    c = RoundController(["apple", "angle"], lambda g: "-----", reporter=rec)
    result = c.run()
    assert result.outcome is Outcome.EMPTY_POOL
    assert result.rounds == 1
    assert result.candidates == []
    assert ("empty",) in rec.events


def test_wrong_length_feedback_is_asked_again():
    replies = iter(["++", "toolong!", "+++++"])
    rec = Recorder()
    c = RoundController(["crane"], lambda g: next(replies), reporter=rec)
    result = c.run()
    assert result.outcome is Outcome.SOLVED
    assert [e[1] for e in rec.events if e[0] == "malformed"] == ["++", "toolong!"]


def test_step_by_step():
    c = RoundController(WORDS, lambda g: score(g, "slate"))
    assert c.phase is Phase.FILTERING
    with pytest.raises(RuntimeError):
        c.result()
    while c.step():
        assert c.phase is Phase.FILTERING
    assert c.done and c.step() is False
    assert c.result().outcome is Outcome.SOLVED


def test_each_round_filters_with_the_merged_constraints():
    c = RoundController(WORDS, lambda g: score(g, "slate"))
    result = c.run()
    sizes = [r.pool_size for r in result.history]
    assert sizes == sorted(sizes, reverse=True)
    for r in result.history[1:]:
        assert r.pool_size < len(WORDS)


def test_words_of_other_shapes_are_not_candidates():
    c = RoundController(["crane", "CRANE", "cranes", "tr4ce"], lambda g: "+++++")
    assert c.candidates == ["crane"]


@pytest.mark.parametrize("config", [SessionConfig(max_rounds=0), SessionConfig(word_length=0)])
def test_invalid_config(config):
    with pytest.raises(ValueError):
        RoundController(WORDS, lambda g: "+++++", config=config)


class BadSolver(BaseSolver):
    id = "bad"

    def next_guess(self, state):
        return "toolong"


def test_invalid_guess_from_solver():
    c = RoundController(WORDS, lambda g: "+++++", solver=BadSolver())
    with pytest.raises(ValueError):
        c.run()


def test_sessions_are_independent():
    a = RoundController(WORDS, lambda g: score(g, "crane"))
    b = RoundController(WORDS, lambda g: score(g, "alone"))
    a.run()
    assert len(b.constraints) == 0
    assert b.run().history[-1].guess == "alone"
