"""Request-level error types.

Each error carries the HTTP status code the API should answer with. Cheating
rejections are not errors: they come back from the anti-cheat services as
ordinary results so callers can tell "bad request" apart from "score rejected".
"""


class ArcadeError(Exception):
    """Base exception for errors reported back to the client."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self):
        return {'error': self.message}


class SessionPayloadError(ArcadeError):
    """A request or session token is missing fields or has the wrong shape."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)
