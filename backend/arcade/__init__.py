from flask import Flask
from flask_cors import CORS
import secrets
import click
from config import Config, DEFAULT_GAME_SECRET_KEY
from arcade.services.anticheat import ChecksumEngine, ValidationRules


def _split(value):
    if isinstance(value, str):
        return [item.strip() for item in value.split(',') if item.strip()]
    return list(value or [])


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    CORS(flask_app, resources={r"/api/*": {"origins": _split(flask_app.config.get('CORS_ORIGINS'))}})

    # Secret and limits are read once here and never refreshed for this process
    secret = flask_app.config.get('GAME_SECRET_KEY') or DEFAULT_GAME_SECRET_KEY
    if secret == DEFAULT_GAME_SECRET_KEY and not flask_app.config.get('TESTING'):
        flask_app.logger.warning("[config] GAME_SECRET_KEY is the built-in default; session tokens can be forged")
    flask_app.extensions['anticheat'] = {
        'engine': ChecksumEngine(secret),
        'rules': ValidationRules.from_config(flask_app.config),
        'scoring_actions': frozenset(_split(flask_app.config.get('SCORING_ACTIONS', 'tap'))),
    }

    from arcade.api.game import game
    flask_app.register_blueprint(game, url_prefix='/api/game')

    from arcade.api.catalog import catalog
    flask_app.register_blueprint(catalog, url_prefix='/api')

    @click.command('gen-secret')
    def gen_secret_command():
        """Prints a random value suitable for GAME_SECRET_KEY."""
        click.echo(secrets.token_hex(32))

    flask_app.cli.add_command(gen_secret_command)

    return flask_app
