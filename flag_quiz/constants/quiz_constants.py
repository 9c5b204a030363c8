"""Game rules shared across UI, server and core layers."""

COUNTRIES: tuple[str, ...] = (
    "Estonia",
    "France",
    "Germany",
    "Ireland",
    "Italy",
    "Nigeria",
    "Poland",
    "Spain",
    "UK",
    "Ukraine",
    "US",
)
OPTIONS_PER_ROUND: int = 3
ROUNDS_PER_GAME: int = 8
