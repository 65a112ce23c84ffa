"""Configuration management with environment variable support."""

import os
import secrets
from dataclasses import dataclass, field

from core.rules import RuleSet


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


def _parse_max_split_hands() -> int | None:
    """Parse BLACKJACK_MAX_SPLIT_HANDS; empty or unset means unlimited."""
    raw = os.getenv("BLACKJACK_MAX_SPLIT_HANDS", "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["*"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limiting configuration."""

    enabled: bool = field(
        default_factory=lambda: os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    )
    requests_per_minute: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_RPM", "60"))
    )


@dataclass(frozen=True)
class SecurityConfig:
    """Security configuration."""

    secret_key: str = field(
        default_factory=lambda: os.getenv("SECRET_KEY", secrets.token_urlsafe(32))
    )


@dataclass(frozen=True)
class GameConfig:
    """Default table rules for new rounds."""

    num_decks: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_NUM_DECKS", "6"))
    )
    blackjack_payout: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_PAYOUT", "1.5"))
    )
    dealer_hits_soft_17: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_DEALER_HITS_SOFT_17", "false").lower() == "true"
    )
    max_split_hands: int | None = field(default_factory=_parse_max_split_hands)

    def to_rules(self) -> RuleSet:
        """Build the RuleSet these settings describe."""
        return RuleSet(
            num_decks=self.num_decks,
            blackjack_payout=self.blackjack_payout,
            dealer_hits_soft_17=self.dealer_hits_soft_17,
            max_split_hands=self.max_split_hands,
        )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    round_ttl: int = field(
        default_factory=lambda: int(os.getenv("ROUND_TTL", "3600"))
    )  # Round timeout in seconds

    game: GameConfig = field(default_factory=GameConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)


# Global configuration instance
config = AppConfig()
