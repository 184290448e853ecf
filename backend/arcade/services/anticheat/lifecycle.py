import secrets
import time
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from arcade.errors import SessionPayloadError
from arcade.models import GameSession
from .checksum import ChecksumEngine
from .validator import ValidationRules, validate_action, INVALID_CHECKSUM, INHUMAN_ACTION_RATE


DEFAULT_SCORING_ACTIONS = frozenset({'tap'})


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ActionOutcome:
    session: Optional[GameSession] = None
    reason: Optional[str] = None

    @property
    def cheating_detected(self) -> bool:
        return self.session is None


@dataclass(frozen=True)
class EndOutcome:
    verified: bool
    final_score: Optional[int] = None
    duration: Optional[int] = None
    actions: Optional[int] = None
    reason: Optional[str] = None

    @property
    def cheating_detected(self) -> bool:
        return not self.verified


def start_session(game_id, engine: ChecksumEngine, now: Optional[int] = None) -> GameSession:
    """Issue a signed token for a new session of ``game_id``."""
    if not isinstance(game_id, str) or not game_id.strip():
        raise SessionPayloadError('Invalid game ID')
    started = now_ms() if now is None else now
    session = GameSession(
        session_id=secrets.token_hex(16),
        game_id=game_id,
        start_time=started,
        last_action_time=started,
    )
    return engine.seal(session)


def record_action(session: GameSession, action, engine: ChecksumEngine,
                  rules: ValidationRules = ValidationRules(),
                  scoring_actions: Iterable[str] = DEFAULT_SCORING_ACTIONS,
                  now: Optional[int] = None) -> ActionOutcome:
    """Validate one action against ``session`` and return the re-signed token.

    A rejected action leaves no new token behind; the caller keeps using (or
    discards) the one it sent.
    """
    if not isinstance(action, str) or not action:
        raise SessionPayloadError('Invalid action')
    current = now_ms() if now is None else now

    result = validate_action(session, current, engine, rules)
    if not result.valid:
        return ActionOutcome(reason=result.reason)

    increment = 1 if action in scoring_actions else 0
    updated = replace(
        session,
        last_action_time=current,
        score=session.score + increment,
        actions=session.actions + 1,
    )
    return ActionOutcome(session=engine.seal(updated))


def end_session(session: GameSession, engine: ChecksumEngine,
                rules: ValidationRules = ValidationRules(),
                now: Optional[int] = None) -> EndOutcome:
    """Verify a finished session and report its final score.

    Besides the checksum, the mean time per action over the whole session has
    to stay above ``rules.min_average_action_interval_ms``.
    """
    if not engine.verify(session):
        return EndOutcome(verified=False, reason=INVALID_CHECKSUM)

    current = now_ms() if now is None else now
    duration = current - session.start_time
    if session.actions > 0 and duration / session.actions < rules.min_average_action_interval_ms:
        return EndOutcome(verified=False, reason=INHUMAN_ACTION_RATE)

    return EndOutcome(
        verified=True,
        final_score=session.score,
        duration=duration,
        actions=session.actions,
    )
