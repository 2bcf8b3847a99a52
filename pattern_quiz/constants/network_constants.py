"""Network configuration constants for the learner API."""

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
MAX_LEARNER_SESSIONS: int = 200
