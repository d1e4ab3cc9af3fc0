"""
Pipeline configuration loading.

Reads config/pipeline.yaml (or the file named by PIPELINE_CONFIG_PATH) with
OmegaConf and exposes it as a PipelineConfig dataclass. The loaded config is
cached; call clear_config_cache() after changing the environment (tests).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "pipeline.yaml"

# Accepted values for failure_policy entries
FAILURE_POLICIES = ("propagate", "substitute_default")

_config_cache: Dict[Path, "PipelineConfig"] = {}


class ConfigError(ValueError):
    """Raised when pipeline.yaml contains an invalid value."""

    pass


@dataclass
class PipelineConfig:
    """
    Resolved pipeline settings.

    Attributes:
        failure_policy: Feature name -> "propagate" | "substitute_default"
        placeholder_text: Text placed in records substituted after a structural failure
        log_dir: Directory for CLI log files
    """

    failure_policy: Dict[str, str] = field(default_factory=dict)
    placeholder_text: str = "Failed to generate."
    log_dir: Path = Path("outs/logs")

    def policy_for(self, feature: str) -> str:
        """Return the configured policy for a feature (propagate when unlisted)."""
        return self.failure_policy.get(feature, "propagate")


def load_pipeline_config(config_path: Optional[Path] = None) -> PipelineConfig:
    """
    Load pipeline.yaml into a PipelineConfig.

    Args:
        config_path: Optional path to config file (defaults to PIPELINE_CONFIG_PATH
                     env variable, then the packaged config/pipeline.yaml)

    Returns:
        PipelineConfig with values from the file

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigError: If a failure_policy value is not recognized
    """
    if config_path is None:
        config_path = Path(os.getenv("PIPELINE_CONFIG_PATH", str(DEFAULT_CONFIG_PATH)))

    if not config_path.exists():
        raise FileNotFoundError(f"Pipeline config not found at {config_path}")

    raw = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True) or {}

    policies = {str(k): str(v) for k, v in (raw.get("failure_policy") or {}).items()}
    for feature, policy in policies.items():
        if policy not in FAILURE_POLICIES:
            raise ConfigError(
                f"Invalid failure_policy '{policy}' for feature '{feature}'. "
                f"Use one of: {', '.join(FAILURE_POLICIES)}"
            )

    logging_section = raw.get("logging") or {}
    log_dir = os.getenv("LOGS_PATH") or logging_section.get("log_dir", "outs/logs")

    return PipelineConfig(
        failure_policy=policies,
        placeholder_text=str(raw.get("placeholder_text", "Failed to generate.")),
        log_dir=Path(log_dir),
    )


def get_pipeline_config(config_path: Optional[Path] = None) -> PipelineConfig:
    """Load the pipeline config once per path and reuse it."""
    if config_path is None:
        config_path = Path(os.getenv("PIPELINE_CONFIG_PATH", str(DEFAULT_CONFIG_PATH)))

    if config_path not in _config_cache:
        _config_cache[config_path] = load_pipeline_config(config_path)
    return _config_cache[config_path]


def clear_config_cache() -> None:
    """Clear the loaded config cache."""
    _config_cache.clear()
