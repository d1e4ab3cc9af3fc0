"""
Tests for pipeline configuration loading.
"""

from pathlib import Path

import pytest

from jobjumper.utils.config import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    clear_config_cache,
    get_pipeline_config,
    load_pipeline_config,
)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate each test from the environment and the config cache."""
    monkeypatch.delenv("PIPELINE_CONFIG_PATH", raising=False)
    monkeypatch.delenv("LOGS_PATH", raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "pipeline.yaml"
    path.write_text(text)
    return path


@pytest.mark.unit
class TestLoadPipelineConfig:
    """Test reading pipeline.yaml."""

    def test_packaged_config(self):
        config = load_pipeline_config(DEFAULT_CONFIG_PATH)
        assert config.policy_for("job_fit") == "propagate"
        assert config.policy_for("interview_prep") == "substitute_default"
        assert config.policy_for("rewrite") == "substitute_default"
        assert config.placeholder_text == "Failed to generate."

    def test_custom_file(self, tmp_path):
        path = write_config(
            tmp_path,
            "failure_policy:\n  job_fit: substitute_default\n"
            "placeholder_text: Try again later\n"
            "logging:\n  log_dir: custom/logs\n",
        )
        config = load_pipeline_config(path)
        assert config.policy_for("job_fit") == "substitute_default"
        assert config.placeholder_text == "Try again later"
        assert config.log_dir == Path("custom/logs")

    def test_unlisted_feature_propagates(self, tmp_path):
        config = load_pipeline_config(write_config(tmp_path, "failure_policy: {}\n"))
        assert config.policy_for("anything") == "propagate"

    def test_invalid_policy(self, tmp_path):
        path = write_config(tmp_path, "failure_policy:\n  job_fit: ignore\n")
        with pytest.raises(ConfigError, match="ignore"):
            load_pipeline_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_pipeline_config(tmp_path / "missing.yaml")

    def test_logs_path_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOGS_PATH", str(tmp_path / "env_logs"))
        config = load_pipeline_config(DEFAULT_CONFIG_PATH)
        assert config.log_dir == tmp_path / "env_logs"


@pytest.mark.unit
class TestGetPipelineConfig:
    """Test cached config access."""

    def test_env_path_used(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "placeholder_text: From env\n")
        monkeypatch.setenv("PIPELINE_CONFIG_PATH", str(path))
        assert get_pipeline_config().placeholder_text == "From env"

    def test_cached(self):
        assert get_pipeline_config() is get_pipeline_config()
