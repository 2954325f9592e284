import time
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AccessToken:
    value: str
    # time.monotonic() deadline; 0 means already expired
    expires_at: float = 0.0
    token_type: str = field(default='Bearer')

    def is_valid(self, now: float = None) -> bool:
        now = time.monotonic() if now is None else now
        return bool(self.value) and now < self.expires_at

    def __repr__(self):
        # never render the token value
        return f'<AccessToken expires_at={self.expires_at:.0f}>'
