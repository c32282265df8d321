"""Application configuration settings."""
import os
import json
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "Game AI Toolkit"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS settings - as comma-separated string or JSON array
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Seed for the API's random source (None = nondeterministic)
    random_seed: Optional[int] = None

    # Genetic algorithm
    ga_max_generations: int = 10000
    ga_target_fitness: int = 100

    # Fuzzy logic
    fuzzy_num_samples: int = 15

    # Search guards
    search_max_iterations: int = 1_000_000
    flood_fill_max_recursive_cells: int = 625

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from string (comma-separated or JSON)."""
        if not self.cors_origins:
            return ["http://localhost:5173"]

        # Try JSON parse first
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
        except json.JSONDecodeError:
            pass

        # Fall back to comma-separated
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Settings shared by the API routes and the algorithm iteration guards.

    Loaded once and reused. With DEBUG=true the environment and .env are
    re-read on every call, so seed and limit changes apply without a restart.
    """
    global _settings
    if _settings is None or os.getenv("DEBUG", "false").lower() == "true":
        _settings = Settings()
    return _settings
