from flask import Blueprint, jsonify

catalog = Blueprint('catalog', __name__)

# Games listed on the arcade front page. Only the playable ones talk to /api/game.
GAMES = [
    {'slug': 'football-tap', 'title': 'Football Tap', 'description': 'Tap your way to soccer glory', 'playable': True},
    {'slug': 'lumberjack', 'title': 'LumberJack', 'description': 'Chop trees, dodge branches', 'playable': True},
    {'slug': 'neon-shooter', 'title': 'Neon Shooter', 'description': 'Blast through cyber waves', 'playable': False},
    {'slug': 'block-puzzle', 'title': 'Block Puzzle', 'description': 'Fit the pieces, clear the board', 'playable': False},
    {'slug': 'rocket-rush', 'title': 'Rocket Rush', 'description': 'Navigate through asteroid fields', 'playable': False},
    {'slug': 'lucky-roll', 'title': 'Lucky Roll', 'description': 'Roll the dice, test your luck', 'playable': False},
]


@catalog.route('/games', methods=['GET'])
def list_games():
    return jsonify({'games': GAMES})


@catalog.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})
