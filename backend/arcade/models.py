from dataclasses import dataclass, asdict
import numbers

from arcade.errors import SessionPayloadError


# Python attribute -> wire name
WIRE_FIELDS = {
    'session_id': 'sessionId',
    'game_id': 'gameId',
    'start_time': 'startTime',
    'last_action_time': 'lastActionTime',
    'score': 'score',
    'actions': 'actions',
    'checksum': 'checksum',
}


@dataclass(frozen=True)
class GameSession:
    """One game session, carried by the client between requests.

    Timestamps are epoch milliseconds. The server keeps no copy: whatever
    state it trusts has to be covered by ``checksum``. Updates never mutate a
    token, they build a new one with ``dataclasses.replace`` and re-sign it.
    """
    session_id: str
    game_id: str
    start_time: int
    last_action_time: int
    score: int = 0
    actions: int = 0
    checksum: str = ''

    def to_dict(self):
        return {WIRE_FIELDS[name]: value for name, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, payload) -> 'GameSession':
        """Parse a token echoed back by the client.

        Raises SessionPayloadError when a field is missing or mistyped. Values
        are not checked for consistency here; that is the validator's job.
        """
        if not isinstance(payload, dict):
            raise SessionPayloadError('Invalid session')
        values = {}
        for name, wire_name in WIRE_FIELDS.items():
            if wire_name not in payload:
                raise SessionPayloadError(f'Session field missing: {wire_name}')
            values[name] = payload[wire_name]

        for name in ('session_id', 'game_id', 'checksum'):
            if not isinstance(values[name], str) or not values[name]:
                raise SessionPayloadError(f'Session field must be a non-empty string: {WIRE_FIELDS[name]}')
        for name in ('start_time', 'last_action_time', 'score', 'actions'):
            values[name] = _as_int(values[name], WIRE_FIELDS[name])
        return cls(**values)


def _as_int(value, wire_name: str) -> int:
    # JSON numbers may arrive as 12.0; bools are ints in Python but never valid here
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise SessionPayloadError(f'Session field must be an integer: {wire_name}')
    if isinstance(value, float) and not value.is_integer():
        raise SessionPayloadError(f'Session field must be an integer: {wire_name}')
    value = int(value)
    if value < 0:
        raise SessionPayloadError(f'Session field must not be negative: {wire_name}')
    return value
