from dataclasses import replace

from arcade.services.anticheat import (
    validate_action,
    ValidationRules,
    INVALID_CHECKSUM,
    ACTION_TOO_FAST,
    SESSION_EXPIRED,
    INVALID_SCORE,
)
from conftest import START

THIRTY_MINUTES = 30 * 60 * 1000


def test_valid_action(engine, session):
    result = validate_action(session, START + 100, engine)
    assert result.valid
    assert result.reason is None


def test_tampered_token(engine, session):
    result = validate_action(replace(session, score=5), START + 100, engine)
    assert not result.valid
    assert result.reason == INVALID_CHECKSUM


def test_rate_limit_boundary(engine, session):
    assert validate_action(session, START + 49, engine).reason == ACTION_TOO_FAST
    assert validate_action(session, START + 50, engine).valid


def test_expiry_boundary(engine, session):
    # exactly thirty minutes is still allowed, one millisecond more is not
    assert validate_action(session, START + THIRTY_MINUTES, engine).valid
    assert validate_action(session, START + THIRTY_MINUTES + 1, engine).reason == SESSION_EXPIRED


def test_score_slack_of_one(engine, session):
    ok = engine.seal(replace(session, score=1, actions=0))
    assert validate_action(ok, START + 100, engine).valid
    bad = engine.seal(replace(session, score=2, actions=0))
    assert validate_action(bad, START + 100, engine).reason == INVALID_SCORE


def test_checks_run_in_order(engine, session):
    # tampered and too fast: integrity wins
    tampered = replace(session, score=9)
    assert validate_action(tampered, START + 1, engine).reason == INVALID_CHECKSUM
    # too fast and expired: rate limit is checked first
    stale = engine.seal(replace(session, last_action_time=START + THIRTY_MINUTES + 10))
    assert validate_action(stale, START + THIRTY_MINUTES + 20, engine).reason == ACTION_TOO_FAST


def test_validation_is_pure(engine, session):
    before = session.to_dict()
    first = validate_action(session, START + 10, engine)
    second = validate_action(session, START + 10, engine)
    assert first == second
    assert session.to_dict() == before


def test_custom_rules(engine, session):
    rules = ValidationRules(min_action_interval_ms=200)
    assert validate_action(session, START + 150, engine, rules).reason == ACTION_TOO_FAST


def test_rules_from_config():
    rules = ValidationRules.from_config({'MIN_ACTION_INTERVAL_MS': '75'})
    assert rules.min_action_interval_ms == 75
    assert rules.max_session_duration_ms == THIRTY_MINUTES
    assert rules.min_average_action_interval_ms == 80
