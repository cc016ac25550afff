from dataclasses import dataclass

TWO_HOURS_IN_SECONDS = 60 * 60 * 2


@dataclass(frozen=True)
class WorkflowSettings:
    """Values the token workflow needs from configuration, injected at construction"""

    base_url: str
    token_ttl_seconds: int = TWO_HOURS_IN_SECONDS

    def __post_init__(self):
        if not self.base_url or not self.base_url.strip():
            raise ValueError("base_url must not be blank")
        if self.token_ttl_seconds <= 0:
            raise ValueError("token_ttl_seconds must be positive")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def expiration_window_hours(self) -> int:
        return self.token_ttl_seconds // 3600
