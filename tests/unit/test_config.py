"""
Runtime Configuration Unit Tests
Tests for mrkl/config/runtime.py

Tests:
- defaults
- JSON file loading and search order
- MRKL_* environment variables override the file
- validation of algorithm, leaf mode and output format
"""
import json

import pytest

from mrkl.config.runtime import (
    RuntimeConfig,
    get_default_config_template,
    load_config,
    load_config_from_env,
    load_config_from_file,
)
from mrkl.schemas.errors import UnsupportedAlgorithmException


class TestDefaults:
    """Tests for RuntimeConfig defaults."""

    def test_defaults(self, clean_env):
        config = load_config()

        assert config.algorithm == "blake2"
        assert config.leaf_mode == "rehash"
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.output_format == "human"

    def test_template_is_valid_json(self):
        data = json.loads(get_default_config_template())
        assert data == RuntimeConfig().to_dict()


class TestFileLoading:
    """Tests for JSON config files."""

    def test_explicit_path(self, clean_env):
        path = clean_env / "custom.json"
        path.write_text(json.dumps({"algorithm": "sha3", "leaf_mode": "rfc6962"}))

        config = load_config(path)

        assert config.algorithm == "sha3"
        assert config.leaf_mode == "rfc6962"

    def test_missing_explicit_path_raises(self, clean_env):
        with pytest.raises(FileNotFoundError):
            load_config(clean_env / "missing.json")

    def test_cwd_file_found(self, clean_env):
        (clean_env / "mrkl.json").write_text(json.dumps({"algorithm": "sha2"}))

        assert load_config().algorithm == "sha2"

    def test_hidden_cwd_file_found(self, clean_env):
        (clean_env / ".mrkl.json").write_text(json.dumps({"output_format": "json"}))

        assert load_config().output_format == "json"

    def test_home_file_found(self, clean_env):
        config_dir = clean_env / "home" / ".config" / "mrkl"
        config_dir.mkdir(parents=True)
        (config_dir / "config.json").write_text(json.dumps({"leaf_mode": "identity"}))

        assert load_config().leaf_mode == "identity"

    def test_cwd_wins_over_home(self, clean_env):
        config_dir = clean_env / "home" / ".config" / "mrkl"
        config_dir.mkdir(parents=True)
        (config_dir / "config.json").write_text(json.dumps({"algorithm": "sha3"}))
        (clean_env / "mrkl.json").write_text(json.dumps({"algorithm": "sha2"}))

        assert load_config().algorithm == "sha2"

    def test_partial_file_keeps_defaults(self, clean_env):
        path = clean_env / "partial.json"
        path.write_text(json.dumps({"log_level": "DEBUG"}))

        config = load_config_from_file(path)

        assert config.log_level == "DEBUG"
        assert config.algorithm == "blake2"


class TestEnvironment:
    """MRKL_* environment variables always win."""

    def test_env_overrides_file(self, clean_env, monkeypatch):
        (clean_env / "mrkl.json").write_text(json.dumps({"algorithm": "sha2"}))
        monkeypatch.setenv("MRKL_ALGORITHM", "sha3")

        assert load_config().algorithm == "sha3"

    def test_all_variables(self, clean_env, monkeypatch):
        monkeypatch.setenv("MRKL_ALGORITHM", "sha2")
        monkeypatch.setenv("MRKL_LEAF_MODE", "identity")
        monkeypatch.setenv("MRKL_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("MRKL_LOG_FILE", "mrkl.log")
        monkeypatch.setenv("MRKL_OUTPUT_FORMAT", "json")

        config = load_config_from_env()

        assert config.algorithm == "sha2"
        assert config.leaf_mode == "identity"
        assert config.log_level == "WARNING"
        assert config.log_file == "mrkl.log"
        assert config.output_format == "json"

    def test_empty_variable_ignored(self, clean_env, monkeypatch):
        monkeypatch.setenv("MRKL_ALGORITHM", "")

        assert load_config().algorithm == "blake2"


class TestValidation:
    """Tests for RuntimeConfig.validate()."""

    def test_unknown_algorithm(self, clean_env, monkeypatch):
        monkeypatch.setenv("MRKL_ALGORITHM", "ripemd160")

        with pytest.raises(UnsupportedAlgorithmException):
            load_config()

    def test_unknown_leaf_mode(self):
        with pytest.raises(UnsupportedAlgorithmException, match="leaf mode"):
            RuntimeConfig(leaf_mode="plain").validate()

    def test_unknown_output_format(self):
        with pytest.raises(ValueError, match="output_format"):
            RuntimeConfig(output_format="xml").validate()
