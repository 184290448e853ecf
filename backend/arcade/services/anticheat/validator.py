from dataclasses import dataclass
from typing import Optional

from arcade.models import GameSession
from .checksum import ChecksumEngine


INVALID_CHECKSUM = 'invalid-checksum'
ACTION_TOO_FAST = 'action-too-fast'
SESSION_EXPIRED = 'session-expired'
INVALID_SCORE = 'invalid-score'
INHUMAN_ACTION_RATE = 'inhuman-action-rate'


@dataclass(frozen=True)
class ValidationRules:
    # Minimum gap between two accepted actions (ms); the boundary itself passes
    min_action_interval_ms: int = 50
    # Sessions older than this are rejected; exactly this age still passes
    max_session_duration_ms: int = 30 * 60 * 1000
    # Mean gap per action over a whole session, checked at game end
    min_average_action_interval_ms: int = 80

    @classmethod
    def from_config(cls, config) -> 'ValidationRules':
        return cls(
            min_action_interval_ms=int(config.get('MIN_ACTION_INTERVAL_MS', cls.min_action_interval_ms)),
            max_session_duration_ms=int(config.get('MAX_SESSION_DURATION_MS', cls.max_session_duration_ms)),
            min_average_action_interval_ms=int(
                config.get('MIN_AVERAGE_ACTION_INTERVAL_MS', cls.min_average_action_interval_ms)),
        )


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: Optional[str] = None


VALID = ValidationResult(valid=True)


def validate_action(session: GameSession, current_time: int, engine: ChecksumEngine,
                    rules: ValidationRules = ValidationRules()) -> ValidationResult:
    """Check whether one more scoring action may be applied to ``session``.

    Runs integrity, rate, expiry and score checks in that order and reports
    the first failure. Does not touch the token.
    """
    if not engine.verify(session):
        return ValidationResult(False, INVALID_CHECKSUM)

    if current_time - session.last_action_time < rules.min_action_interval_ms:
        return ValidationResult(False, ACTION_TOO_FAST)

    if current_time - session.start_time > rules.max_session_duration_ms:
        return ValidationResult(False, SESSION_EXPIRED)

    # One point of slack over the action count is tolerated
    if session.score > session.actions + 1:
        return ValidationResult(False, INVALID_SCORE)

    return VALID
