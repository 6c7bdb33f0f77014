"""Configuration management using Pydantic settings."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from camsim.simulation.params import SimulationParams


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "ArtGuard"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Static data (built-in museum and floor maps when unset or missing)
    floor_maps_path: Optional[Path] = None
    museum_path: Optional[Path] = None

    # Tracker population
    tracker_min: int = 10
    tracker_max: int = 35
    tracker_radius: float = 5.0
    tracker_max_speed: float = 0.1    # map units per tick, per axis

    # Stillness detection
    stillness_threshold: float = 0.025  # map units per tick
    suspicious_duration: float = 8.0    # seconds still before flagged

    # Display
    focus_scale: float = 2.4
    frame_rate: float = 60.0            # ticks per second per camera
    grid_size: int = 4
    simulation_autostart: bool = True

    # Policies ("each_obstacle" | "first_hit", "level" | "edge",
    # "reinitialize" | "carry_over")
    collision_policy: str = "each_obstacle"
    notify_policy: str = "level"
    rescale_policy: str = "reinitialize"

    # Alerting
    alert_cooldown: float = 30.0        # seconds between alerts per tracker
    alert_history: int = 200

    # Operator chat
    transcript_max_messages: int = 200

    def simulation_params(self) -> SimulationParams:
        return SimulationParams(
            min_trackers=self.tracker_min,
            max_trackers=self.tracker_max,
            tracker_radius=self.tracker_radius,
            max_speed=self.tracker_max_speed,
            stillness_threshold=self.stillness_threshold,
            suspicious_duration=self.suspicious_duration,
            focus_scale=self.focus_scale,
            frame_rate=self.frame_rate,
            collision_policy=self.collision_policy,
            notify_policy=self.notify_policy,
        )


settings = Settings()
