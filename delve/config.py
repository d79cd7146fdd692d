"""
Configuration - Game constants fixed at process start.

Values come from the environment (prefix DELVE_) or a local .env file,
falling back to the standard game:

    DELVE_ENEMY_CARD_COUNT=15
    DELVE_SANCTUM_CARD_COUNT=3
    DELVE_ENHANCEMENT_POLICY=danger_mode
"""

from __future__ import annotations
from enum import Enum
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnhancementPolicy(str, Enum):
    """When enemy enhancement runs after a draw."""
    DANGER_MODE = "danger_mode"  # Only once the deck has been recycled
    ALWAYS = "always"  # After every draw


class LogFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class GameSettings(BaseSettings):
    """Deck composition, starting resources and runtime options."""

    model_config = SettingsConfigDict(
        env_prefix="DELVE_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    enemy_card_count: int = Field(default=15, ge=0)
    sanctum_card_count: int = Field(default=3, ge=0)
    trap_card_count: int = Field(default=5, ge=0)
    treasure_card_count: int = Field(default=10, ge=0)

    max_hand_count: int = Field(default=3, ge=1)
    max_party_force: int = Field(default=100, gt=0, description="Denominator of the enemy damage ratio")
    initial_party_force: int = 100
    initial_necessary_progression: int = 50

    enhancement_policy: EnhancementPolicy = EnhancementPolicy.DANGER_MODE

    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.TEXT

    @property
    def total_card_count(self) -> int:
        return self.enemy_card_count + self.trap_card_count + self.treasure_card_count

    @model_validator(mode="after")
    def _check_sanctum_fits(self) -> GameSettings:
        if self.sanctum_card_count > self.total_card_count:
            raise ValueError(
                f"sanctum_card_count ({self.sanctum_card_count}) exceeds "
                f"the deck size ({self.total_card_count})"
            )
        return self


@lru_cache
def get_settings() -> GameSettings:
    """Process-wide settings, loaded once."""
    return GameSettings()
