"""
Unit tests for the configuration system.

Tests cover:
- Defaults and validation
- YAML/JSON round trips
- Environment variable overrides
- load_config source priority

Author: genalg developers
License: MIT
"""

import pytest
from pydantic import ValidationError

from genalg.config import EngineConfig, GenalgConfig, OperatorsConfig, load_config


class TestGenalgConfig:
    """Test configuration models."""

    def test_defaults(self):
        """Test defaults describe the 32-bit OneMax run."""
        config = GenalgConfig()
        assert config.genotype.length == 32
        assert config.operators.bit_flip_probability == 0.02
        assert config.operators.crossover_points == 1
        assert config.engine.population_size == 20
        assert config.engine.recombination_probability == 0.8
        assert config.engine.mutation_probability == 0.8
        assert config.engine.tournament_size == 2
        assert config.seed is None

    @pytest.mark.parametrize("probability", [0.0, 1.0])
    def test_bit_flip_probability_bounds(self, probability):
        """Test the mutation precondition is enforced at load time."""
        with pytest.raises(ValidationError):
            OperatorsConfig(bit_flip_probability=probability)

    def test_engine_bounds(self):
        """Test invalid engine settings are rejected."""
        with pytest.raises(ValidationError):
            EngineConfig(population_size=0)
        with pytest.raises(ValidationError):
            EngineConfig(tournament_size=0)
        with pytest.raises(ValidationError):
            EngineConfig(mutation_probability=1.2)

    def test_yaml_round_trip(self, temp_dir):
        """Test saving and loading YAML."""
        config = GenalgConfig(seed=9)
        config.engine.generations = 7
        path = temp_dir / "run.yaml"

        config.to_yaml(path)
        loaded = GenalgConfig.from_yaml(path)

        assert loaded == config

    def test_json_round_trip(self, temp_dir):
        """Test saving and loading JSON."""
        config = GenalgConfig(log_level="DEBUG")
        config.operators.crossover_points = 3
        path = temp_dir / "nested" / "run.json"

        config.to_json(path)
        loaded = GenalgConfig.from_json(path)

        assert loaded == config

    def test_partial_yaml(self, temp_dir):
        """Test omitted sections fall back to defaults."""
        path = temp_dir / "partial.yml"
        path.write_text("engine:\n  population_size: 50\n")

        config = GenalgConfig.from_yaml(path)

        assert config.engine.population_size == 50
        assert config.genotype.length == 32

    def test_missing_file(self, temp_dir):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            GenalgConfig.from_yaml(temp_dir / "absent.yaml")

    def test_from_env(self, monkeypatch):
        """Test nested environment overrides."""
        monkeypatch.setenv("GENALG_ENGINE__POPULATION_SIZE", "40")
        monkeypatch.setenv("GENALG_OPERATORS__BIT_FLIP_PROBABILITY", "0.05")
        monkeypatch.setenv("GENALG_SEED", "11")
        monkeypatch.setenv("GENALG_LOG_LEVEL", "WARNING")

        config = GenalgConfig.from_env()

        assert config.engine.population_size == 40
        assert config.operators.bit_flip_probability == 0.05
        assert config.seed == 11
        assert config.log_level == "WARNING"


class TestLoadConfig:
    """Test load_config source priority."""

    def test_defaults_without_sources(self, monkeypatch):
        """Test defaults are used when nothing is configured."""
        monkeypatch.delenv("GENALG_SEED", raising=False)
        config = load_config(env_prefix="GENALG_TEST_UNSET_")
        assert config == GenalgConfig()

    def test_environment(self, monkeypatch):
        """Test environment variables are picked up."""
        monkeypatch.setenv("GENALG_TESTENV_GENOTYPE__LENGTH", "64")
        config = load_config(env_prefix="GENALG_TESTENV_")
        assert config.genotype.length == 64

    def test_file_wins(self, temp_dir, monkeypatch):
        """Test an explicit file takes precedence over the environment."""
        monkeypatch.setenv("GENALG_GENOTYPE__LENGTH", "64")
        path = temp_dir / "run.json"
        path.write_text('{"genotype": {"length": 8}}')

        assert load_config(path).genotype.length == 8

    def test_unknown_suffix(self, temp_dir):
        """Test unsupported formats are rejected."""
        with pytest.raises(ValueError):
            load_config(temp_dir / "run.toml")
