import hashlib
import hmac
from dataclasses import replace

from arcade.models import GameSession


class ChecksumEngine:
    """Keyed integrity tag over a session's signed fields.

    Signed content is ``sessionId:gameId:startTime:score:actions``.
    ``last_action_time`` is not part of it, so timing data can be altered in
    transit without breaking the tag.
    """

    def __init__(self, secret: str):
        if not secret:
            raise ValueError('checksum secret must not be empty')
        self._key = secret.encode('utf-8')

    def sign(self, session_id: str, game_id: str, start_time: int, score: int, actions: int) -> str:
        data = f"{session_id}:{game_id}:{start_time}:{score}:{actions}"
        return hmac.new(self._key, data.encode('utf-8'), hashlib.sha256).hexdigest()

    def checksum_for(self, session: GameSession) -> str:
        return self.sign(session.session_id, session.game_id, session.start_time,
                         session.score, session.actions)

    def seal(self, session: GameSession) -> GameSession:
        """Return a copy of ``session`` carrying a freshly computed checksum."""
        return replace(session, checksum=self.checksum_for(session))

    def verify(self, session: GameSession) -> bool:
        expected = self.checksum_for(session)
        return hmac.compare_digest(session.checksum.encode('utf-8'), expected.encode('utf-8'))
