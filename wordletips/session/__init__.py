from .core import (
    MAX_ROUNDS,
    WORD_LENGTH,
    Outcome,
    Phase,
    Reporter,
    Round,
    RoundController,
    SessionConfig,
    SessionResult,
)

__all__ = [
    "MAX_ROUNDS", "WORD_LENGTH",
    "Outcome", "Phase", "Reporter", "Round", "RoundController", "SessionConfig", "SessionResult",
]
