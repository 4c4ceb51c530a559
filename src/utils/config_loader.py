"""
Configuration loader for the onboarding wizard integrations
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "onboarding.yml"


class StepServiceConfig(BaseModel):
    """Step service / coverage catalogue endpoint configuration"""

    base_url: str = ""
    api_key: str = ""
    save_step_path: str = "/onboarding/save-step"
    coverages_path: str = "/onboarding/coverages"
    timeout_seconds: float = Field(default=15.0, gt=0.0, le=300.0)


class OnboardingConfig(BaseModel):
    """Complete onboarding configuration"""

    integrations_mode: str = ""
    step_service: StepServiceConfig = Field(default_factory=lambda: StepServiceConfig())
    coverage_file: Optional[str] = None
    mock_output_dir: Optional[str] = None

    def use_real_integrations(self) -> bool:
        mode = self.integrations_mode.strip().lower()
        if mode in {"real", "live"}:
            return True
        if mode in {"mock", "test"}:
            return False
        return bool(self.step_service.base_url)


# env var -> (section, key); section None means top level
_ENV_OVERRIDES = {
    "INTEGRATIONS_MODE": (None, "integrations_mode"),
    "ONBOARDING_STEP_API_URL": ("step_service", "base_url"),
    "ONBOARDING_STEP_API_KEY": ("step_service", "api_key"),
    "ONBOARDING_SAVE_STEP_PATH": ("step_service", "save_step_path"),
    "ONBOARDING_COVERAGES_PATH": ("step_service", "coverages_path"),
    "ONBOARDING_HTTP_TIMEOUT": ("step_service", "timeout_seconds"),
    "ONBOARDING_COVERAGE_FILE": (None, "coverage_file"),
    "ONBOARDING_MOCK_OUTPUT_DIR": (None, "mock_output_dir"),
}


def _apply_env_overrides(config_data: Dict[str, Any], env: Mapping[str, str]) -> Dict[str, Any]:
    data = dict(config_data)
    for var, (section, key) in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value is None or value == "":
            continue
        if section is None:
            data[key] = value
        else:
            data[section] = {**(data.get(section) or {}), key: value}
    return data


def load_onboarding_config(config_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> OnboardingConfig:
    """
    Load and validate onboarding configuration

    Values come from an optional YAML file, then environment variables
    (a local .env file is loaded first when present).

    Args:
        config_path: Path to config file. Defaults to config/onboarding.yml if it exists
        env: Environment mapping. Defaults to os.environ

    Returns:
        Validated OnboardingConfig object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if env is None:
        load_dotenv()
        env = os.environ

    config_data: Dict[str, Any] = {}
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    path = config_path or (DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.exists() else None)
    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

    try:
        config = OnboardingConfig(**_apply_env_overrides(config_data, env))
        logger.info("Loaded onboarding config (source=%s)", path or "environment")
        return config
    except ValidationError as e:
        logger.error("Config validation failed: %s", e)
        raise
