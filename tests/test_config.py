"""
Tests for configuration handling.
"""

import json
from pathlib import Path

import pytest

from chilean_run.config import Config, create_default_config
from chilean_run.exceptions import ConfigError
from chilean_run.generators.run_generator import RunGeneratorConfig


class TestConfig:
    """Tests for Config dataclass."""

    def test_create_default_config(self):
        config = create_default_config()
        assert config.quantity == 1
        assert config.min_prefix == 1
        assert config.max_prefix == 27
        assert config.zero_pad is False
        assert config.seed is None

    def test_config_to_dict(self, tmp_path):
        config = Config(quantity=3, log_file=tmp_path / "run.log")
        data = config.to_dict()
        assert data["quantity"] == 3
        assert data["log_file"] == str(tmp_path / "run.log")

    def test_config_from_dict(self):
        config = Config.from_dict({"quantity": 4, "seed": 7, "log_file": "out.log"})
        assert config.quantity == 4
        assert config.seed == 7
        assert config.log_file == Path("out.log")

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"quantity": 2, "colour": "red"})
        assert config.quantity == 2

    def test_config_save_and_load(self, tmp_path):
        config = Config(quantity=10, min_prefix=5, max_prefix=9, zero_pad=True)
        config_file = tmp_path / "config.json"
        config.save_to_file(config_file)

        loaded = Config.load_from_file(config_file)
        assert loaded == config

    def test_load_invalid_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        with pytest.raises(ConfigError):
            Config.load_from_file(config_file)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            Config.load_from_file(tmp_path / "missing.json")

    def test_load_non_object(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(ConfigError, match="JSON object"):
            Config.load_from_file(config_file)

    def test_default_is_valid(self):
        assert create_default_config().validate() == []

    def test_validate_bad_range(self):
        errors = Config(min_prefix=10, max_prefix=2).validate()
        assert any("exceeds" in e for e in errors)

    def test_validate_negative_values(self):
        errors = Config(quantity=-1, min_prefix=-2).validate()
        assert len(errors) == 2

    def test_validate_log_level(self):
        errors = Config(log_level="LOUD").validate()
        assert errors == ["Invalid log level: LOUD"]

    def test_validate_log_file_directory(self, tmp_path):
        errors = Config(log_file=tmp_path).validate()
        assert any("not a file" in e for e in errors)

    def test_generator_config(self):
        config = Config(min_prefix=3, max_prefix=8, seed=11)
        assert config.generator_config() == RunGeneratorConfig(
            min_prefix=3, max_prefix=8, seed=11
        )


class TestFieldTypes:
    """Tests for type checking of configuration values."""

    @pytest.mark.parametrize(
        "data",
        [
            {"quantity": "5"},
            {"min_prefix": 1.5},
            {"max_prefix": None},
            {"seed": "42"},
            {"zero_pad": "yes"},
            {"log_level": 10},
            {"log_file": 3},
            {"verbose": 1},
        ],
    )
    def test_wrong_type_raises(self, data):
        with pytest.raises(ConfigError):
            Config.from_dict(data)

    def test_bool_is_not_a_count(self):
        with pytest.raises(ConfigError, match="quantity must be int"):
            Config.from_dict({"quantity": True})

    def test_null_seed_allowed(self):
        assert Config.from_dict({"seed": None}).seed is None

    def test_empty_log_file_means_none(self):
        assert Config.from_dict({"log_file": ""}).log_file is None

    def test_load_file_with_wrong_type(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"quantity": "5"}))
        with pytest.raises(ConfigError, match="quantity"):
            Config.load_from_file(config_file)


class TestOverride:
    """Tests for applying explicit values over a configuration."""

    def test_given_values_win(self):
        base = Config(quantity=6, zero_pad=True)
        merged = base.override({"quantity": 1, "zero_pad": False})
        assert merged.quantity == 1
        assert merged.zero_pad is False

    def test_value_equal_to_default_still_wins(self):
        base = Config(log_level="DEBUG")
        assert base.override({"log_level": "INFO"}).log_level == "INFO"

    def test_missing_keys_keep_base(self):
        base = Config(quantity=5, seed=3)
        merged = base.override({})
        assert merged == base

    def test_does_not_modify_base(self):
        base = Config(quantity=5)
        base.override({"quantity": 9})
        assert base.quantity == 5

    def test_path_values_accepted(self, tmp_path):
        merged = Config().override({"log_file": tmp_path / "run.log"})
        assert merged.log_file == tmp_path / "run.log"

    def test_wrong_type_raises(self):
        with pytest.raises(ConfigError):
            Config().override({"quantity": "9"})
