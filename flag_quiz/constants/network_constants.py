"""Network configuration constants for the browser version of the game."""

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8000
