"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """Simulation tuning. Times are in milliseconds, distances in pixels."""

    # Play area
    play_area_width: int = Field(default=800, gt=0)
    play_area_height: int = Field(default=400, gt=0)
    ground_offset: int = 40  # ground line sits this far above the bottom edge

    # Player
    player_width: int = 60
    player_height: int = 80
    player_start_x: float = 50.0
    player_speed: float = 5.0

    # Jump
    jump_duration: float = Field(default=600.0, gt=0)
    jump_height: float = 100.0

    # Boost
    boost_duration: float = 3000.0
    boost_scroll_bonus: float = 3.0
    boost_player_multiplier: float = 1.5

    # Spawning
    spawn_interval: float = 2000.0
    powerup_chance: float = Field(default=0.15, ge=0.0, le=1.0)
    powerup_size: float = 25.0
    obstacle_min_size: float = 30.0
    obstacle_max_size: float = 50.0

    # Scoring
    obstacle_points: int = 10

    # When enabled, per-tick displacements are scaled by elapsed real time
    # against a 60 Hz reference frame instead of assuming one tick per frame.
    scale_by_elapsed: bool = False
    reference_frame_ms: float = 1000.0 / 60.0

    @property
    def ground_y(self) -> float:
        return float(self.play_area_height - self.ground_offset)

    @property
    def max_player_x(self) -> float:
        return float(self.play_area_width - self.player_width)


class SimulatorSettings(BaseSettings):
    """Desktop simulator window settings."""

    title: str = "Side Scroller"
    scale: int = Field(default=1, ge=1)
    fps: int = 60
    fullscreen: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SIDESCROLLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # Paths
    data_path: Path = Field(default_factory=lambda: Path.home() / ".sidescroller")

    # Nested settings
    game: GameSettings = Field(default_factory=GameSettings)
    simulator: SimulatorSettings = Field(default_factory=SimulatorSettings)

    @property
    def highscore_file(self) -> Path:
        """Path to the persisted high score."""
        return self.data_path / "highscore.json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
