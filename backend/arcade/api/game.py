from flask import Blueprint, jsonify, request, current_app
from arcade.errors import ArcadeError, SessionPayloadError
from arcade.models import GameSession
from arcade.services.anticheat import start_session, record_action, end_session


game = Blueprint('game', __name__)


def _anticheat():
    return current_app.extensions['anticheat']


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise SessionPayloadError('Invalid request')
    return data


def _session_from(data: dict) -> GameSession:
    if not data.get('session'):
        raise SessionPayloadError('Invalid session')
    return GameSession.from_dict(data['session'])


@game.errorhandler(ArcadeError)
def handle_arcade_error(exc):
    current_app.logger.info(f"[bad-request] path={request.path} error={exc.message}")
    return jsonify(exc.to_dict()), exc.status_code


@game.route('/start', methods=['POST'])
def start_game():
    data = _json_body()
    session = start_session(data.get('gameId'), _anticheat()['engine'])
    current_app.logger.info(f"[session-start] session={session.session_id} game={session.game_id}")
    return jsonify({'session': session.to_dict()}), 201


@game.route('/action', methods=['POST'])
def game_action():
    data = _json_body()
    session = _session_from(data)
    cfg = _anticheat()
    outcome = record_action(session, data.get('action'), cfg['engine'], cfg['rules'], cfg['scoring_actions'])
    if outcome.cheating_detected:
        current_app.logger.warning(
            f"[action-rejected] session={session.session_id} game={session.game_id} reason={outcome.reason}")
        return jsonify({
            'error': 'Action rejected',
            'reason': outcome.reason,
            'cheatingDetected': True,
        }), 403
    return jsonify({'session': outcome.session.to_dict()})


@game.route('/end', methods=['POST'])
def end_game():
    data = _json_body()
    session = _session_from(data)

    cfg = _anticheat()
    outcome = end_session(session, cfg['engine'], cfg['rules'])
    if outcome.cheating_detected:
        current_app.logger.warning(
            f"[end-rejected] session={session.session_id} game={session.game_id} reason={outcome.reason}")
        return jsonify({
            'error': 'Score verification failed',
            'reason': outcome.reason,
            'cheatingDetected': True,
        }), 403

    current_app.logger.info(
        f"[session-end] session={session.session_id} game={session.game_id} "
        f"score={outcome.final_score} actions={outcome.actions} duration={outcome.duration}")
    return jsonify({
        'verified': True,
        'finalScore': outcome.final_score,
        'duration': outcome.duration,
        'actions': outcome.actions,
    })
