"""Anti-cheat protocol for score submission.

The server is stateless: a session lives entirely in the signed token the
client echoes back, and every function here is a pure computation over its
inputs (plus the clock when no ``now`` is passed).

Known race: if a client sends two actions for the same session at once, both
are validated against the same token and whichever response it keeps wins.
"""

from .checksum import ChecksumEngine
from .validator import (
    ValidationRules,
    ValidationResult,
    validate_action,
    INVALID_CHECKSUM,
    ACTION_TOO_FAST,
    SESSION_EXPIRED,
    INVALID_SCORE,
    INHUMAN_ACTION_RATE,
)
from .lifecycle import (
    ActionOutcome,
    EndOutcome,
    start_session,
    record_action,
    end_session,
    now_ms,
    DEFAULT_SCORING_ACTIONS,
)
