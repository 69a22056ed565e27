"""
Round controller for one interactive session.

One round:
  FILTERING          narrow the pool with the accumulated constraints
  GUESSING           pick the best-scoring candidate
  AWAITING_FEEDBACK  ask for the game's response (re-asked until the length fits)
  MERGING            parse the response and merge it into the constraint set

The session is DONE when the pool empties, the response is all exact, or the
round cap is hit. The controller owns its pool and constraint set; run one
controller per game.

The feedback channel is any callable `ask(guess) -> str`. A human at a
terminal, the harness's reference scorer and a test's canned list all fit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence

from wordletips.engine import (
    ConstraintSet,
    filter_candidates,
    is_solved,
    is_valid_word,
    is_well_formed,
    parse_feedback,
)
from wordletips.engine.constraints import Constraint
from wordletips.solvers import BaseSolver, EmptyCandidatePool, PositionalFreqSolver

log = logging.getLogger(__name__)

# Standard game rules.
WORD_LENGTH = 5
MAX_ROUNDS = 6

FeedbackChannel = Callable[[str], str]


class Phase(Enum):
    LOADING = "loading"
    FILTERING = "filtering"
    GUESSING = "guessing"
    AWAITING_FEEDBACK = "awaiting_feedback"
    MERGING = "merging"
    DONE = "done"


class Outcome(Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    EMPTY_POOL = "empty_pool"


@dataclass(frozen=True)
class SessionConfig:
    word_length: int = WORD_LENGTH
    max_rounds: int = MAX_ROUNDS

    def validate(self) -> None:
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        if self.max_rounds < 1:
            raise ValueError(f"max_rounds must be positive; got {self.max_rounds}")


@dataclass
class Round:
    number: int
    pool_size: int
    guess: str
    response: str
    changed: List[Constraint] = field(default_factory=list)


@dataclass
class SessionResult:
    outcome: Outcome
    rounds: int
    history: List[Round]
    candidates: List[str]
    constraints: ConstraintSet

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.SOLVED


class Reporter:
    """Display hooks. The base class is silent; the CLI prints."""

    def on_start(self, pool_size: int) -> None:
        pass

    def on_guess(self, number: int, pool_size: int, guess: str) -> None:
        pass

    def on_malformed(self, response: str, expected_length: int) -> None:
        pass

    def on_constraints(self, constraints: ConstraintSet) -> None:
        pass

    def on_solved(self, guess: str, rounds: int) -> None:
        pass

    def on_empty_pool(self) -> None:
        pass


class RoundController:
    def __init__(
            self,
            words: Sequence[str],
            ask: FeedbackChannel,
            *,
            config: Optional[SessionConfig] = None,
            solver: Optional[BaseSolver] = None,
            reporter: Optional[Reporter] = None,
    ):
        self.phase = Phase.LOADING
        self.config = config or SessionConfig()
        self.config.validate()
        self.ask = ask
        self.reporter = reporter or Reporter()

        N = self.config.word_length
        self.candidates: List[str] = [w for w in words if is_valid_word(w, N)]
        self.constraints = ConstraintSet()
        self.history: List[Round] = []
        self.outcome: Optional[Outcome] = None

        self.solver = solver or PositionalFreqSolver()
        self.solver.reset(words=self.candidates, N=N)

        log.debug("session loaded with %d candidates (N=%d, max_rounds=%d)",
                  len(self.candidates), N, self.config.max_rounds)
        self.reporter.on_start(len(self.candidates))
        self.phase = Phase.FILTERING

    @property
    def done(self) -> bool:
        return self.phase is Phase.DONE

    def _finish(self, outcome: Outcome) -> None:
        self.outcome = outcome
        self.phase = Phase.DONE
        log.debug("session done: %s after %d round(s)", outcome.value, len(self.history))

    def _request_feedback(self, guess: str) -> str:
        N = self.config.word_length
        while True:
            response = self.ask(guess).strip()
            if is_well_formed(response, N):
                return response
            log.debug("rejected response %r for %s", response, guess)
            self.reporter.on_malformed(response, N)

    def step(self) -> bool:
        """
        Play one round. Returns True while the session can continue.
        """
        if self.done:
            return False

        number = len(self.history) + 1

        # FILTERING
        self.candidates = filter_candidates(self.candidates, self.constraints)

        # GUESSING
        self.phase = Phase.GUESSING
        try:
            guess = self.solver.next_guess({
                "turn": number,
                "N": self.config.word_length,
                "candidates": self.candidates,
                "constraints": self.constraints,
            })
        except EmptyCandidatePool:
            self.reporter.on_empty_pool()
            self._finish(Outcome.EMPTY_POOL)
            return False
        if not is_valid_word(guess, self.config.word_length):
            raise ValueError(f"solver {self.solver.id} proposed an invalid guess: {guess!r}")
        self.reporter.on_guess(number, len(self.candidates), guess)
        log.debug("round %d: %d candidates, guessing %s", number, len(self.candidates), guess)

        # AWAITING_FEEDBACK
        self.phase = Phase.AWAITING_FEEDBACK
        response = self._request_feedback(guess)

        # MERGING
        self.phase = Phase.MERGING
        changed = self.constraints.merge(parse_feedback(guess, response))
        self.history.append(Round(number, len(self.candidates), guess, response, changed))
        self.reporter.on_constraints(self.constraints)

        if is_solved(response):
            self.candidates = [guess]
            self.reporter.on_solved(guess, number)
            self._finish(Outcome.SOLVED)
            return False
        if number >= self.config.max_rounds:
            self.candidates = filter_candidates(self.candidates, self.constraints)
            self._finish(Outcome.EXHAUSTED)
            return False

        self.phase = Phase.FILTERING
        return True

    def run(self) -> SessionResult:
        while self.step():
            pass
        return self.result()

    def result(self) -> SessionResult:
        if self.outcome is None:
            raise RuntimeError("session is still running")
        return SessionResult(
            outcome=self.outcome,
            rounds=len(self.history),
            history=list(self.history),
            candidates=list(self.candidates),
            constraints=self.constraints.copy(),
        )
