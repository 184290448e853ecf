import os

DEFAULT_GAME_SECRET_KEY = 'blockplay-secret-key-change-in-production'

class Config:
    # Signs session tokens. The default is public: override it in any real deployment.
    GAME_SECRET_KEY = os.environ.get('GAME_SECRET_KEY') or DEFAULT_GAME_SECRET_KEY
    # Anti-cheat limits (milliseconds)
    MIN_ACTION_INTERVAL_MS = int(os.environ.get('MIN_ACTION_INTERVAL_MS', '50'))
    MAX_SESSION_DURATION_MS = int(os.environ.get('MAX_SESSION_DURATION_MS', str(30 * 60 * 1000)))
    MIN_AVERAGE_ACTION_INTERVAL_MS = int(os.environ.get('MIN_AVERAGE_ACTION_INTERVAL_MS', '80'))
    # Action kinds worth one point, comma-separated
    SCORING_ACTIONS = os.environ.get('SCORING_ACTIONS', 'tap')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'http://localhost:3000,http://127.0.0.1:3000')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
