"""Tests for settings and helpers."""
import math

import pytest
from gameai import config
from gameai.config import Settings, get_settings
from gameai.utils.helpers import (
    format_grid,
    json_number,
    parse_cost_matrix,
    validate_square_grid,
)


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        """Test default algorithm settings."""
        settings = Settings()

        assert settings.ga_max_generations == 10000
        assert settings.ga_target_fitness == 100
        assert settings.fuzzy_num_samples == 15
        assert settings.flood_fill_max_recursive_cells == 625

    def test_env_override(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("RANDOM_SEED", "7")
        monkeypatch.setenv("FUZZY_NUM_SAMPLES", "30")

        settings = Settings()

        assert settings.random_seed == 7
        assert settings.fuzzy_num_samples == 30

    def test_get_settings_cached(self, monkeypatch):
        """Test that settings are reused unless DEBUG is on."""
        monkeypatch.setattr(config, "_settings", None)
        monkeypatch.setenv("DEBUG", "false")

        first = get_settings()
        monkeypatch.setenv("RANDOM_SEED", "11")

        assert get_settings() is first

        monkeypatch.setenv("DEBUG", "true")

        assert get_settings().random_seed == 11

    def test_cors_origins_formats(self):
        """Test comma-separated and JSON CORS origins."""
        assert Settings(cors_origins="http://a, http://b").get_cors_origins() == ["http://a", "http://b"]
        assert Settings(cors_origins='["http://c"]').get_cors_origins() == ["http://c"]


class TestHelpers:
    """Test cases for helper functions."""

    def test_validate_square_grid(self):
        """Test grid validation messages."""
        assert validate_square_grid([[0, 1], [1, 0]]) == (True, None)
        assert validate_square_grid([])[0] is False
        assert validate_square_grid([[0, 1], [0]])[0] is False
        assert validate_square_grid([[0, "a"], [0, 0]])[0] is False

    def test_parse_cost_matrix(self):
        """Test that null costs become infinity."""
        matrix = parse_cost_matrix([[0, None], [2, 0]])

        assert math.isinf(matrix[0][1])
        assert matrix[1][0] == 2

    def test_parse_cost_matrix_ragged(self):
        """Test that a ragged matrix is rejected."""
        with pytest.raises(ValueError):
            parse_cost_matrix([[0, 1], [0]])

    def test_json_number(self):
        """Test infinity mapping."""
        assert json_number(math.inf) is None
        assert json_number(3.5) == 3.5

    def test_format_grid(self):
        """Test aligned grid text."""
        assert format_grid([[1, 10], [0, 2]]) == " 1 10\n 0  2"
