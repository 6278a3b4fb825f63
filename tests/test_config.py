"""Tests for configuration and logging setup."""
import logging
from pathlib import Path

import pytest

from riq import Config, ScoringParams, get_default_config, setup_logging


class TestConfig:
    """Tests for Config."""

    def test_relative_input_resolves_to_data_dir(self):
        """Test relative input paths are looked up in data/."""
        config = Config(input_file="ifvs.json")

        assert Path(config.input_file) == config.data_dir / "ifvs.json"

    def test_absolute_input_kept(self, tmp_path):
        """Test absolute paths are left alone."""
        path = tmp_path / "ifvs.json"

        assert Config(input_file=str(path)).input_file == str(path)

    def test_defaults(self):
        """Test default scoring and presentation settings."""
        config = Config(input_file="ifvs.json")

        assert config.scoring_params == ScoringParams(decimal_places=4)
        assert config.sort_results is False
        assert config.output_format == "table"

    def test_unknown_output_format(self):
        """Test an unsupported output format is rejected."""
        with pytest.raises(ValueError):
            Config(input_file="ifvs.json", output_format="xml")

    def test_default_config_points_at_sample(self):
        """Test the bundled sample file is the default input."""
        config = get_default_config()

        assert Path(config.input_file).name == "sample_ifvs.json"
        assert Path(config.input_file).exists()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_idempotent(self):
        """Test repeated setup does not stack handlers."""
        logger = setup_logging()
        setup_logging(logging.DEBUG)

        assert logger.name == "riq"
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
