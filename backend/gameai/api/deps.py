"""API dependencies."""
import random

from ..config import get_settings, Settings


def get_app_settings() -> Settings:
    """Dependency for application settings."""
    return get_settings()


def get_rng() -> random.Random:
    """Dependency for a per-request random source, seeded when RANDOM_SEED is set."""
    return random.Random(get_settings().random_seed)
