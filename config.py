"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    starting_credit: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_STARTING_CREDIT", "100"))
    )
    dealer_stand_threshold: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DEALER_THRESHOLD", "17"))
    )
    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_file: str | None = field(default_factory=lambda: os.getenv("BLACKJACK_LOG_FILE") or None)

    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
