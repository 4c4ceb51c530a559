import pytest

from src.integrations.clients.mocks.local_coverage_catalogue import LocalCoverageCatalogueClient
from src.integrations.clients.mocks.step_service import MockStepServiceClient
from src.integrations.clients.real_http.coverage_catalogue import HttpCoverageCatalogueClient
from src.integrations.clients.real_http.step_service import HttpStepServiceClient
from src.integrations.selection import select_coverage_client, select_step_service
from src.utils.config_loader import OnboardingConfig, load_onboarding_config


def test_defaults_without_file_or_env(tmp_path):
    config = load_onboarding_config(env={})
    assert config.use_real_integrations() is False
    assert config.step_service.timeout_seconds == 15.0


def test_yaml_file_then_env_overrides(tmp_path):
    path = tmp_path / "onboarding.yml"
    path.write_text(
        "step_service:\n  base_url: https://partner.example\n  timeout_seconds: 30\n",
        encoding="utf-8",
    )
    config = load_onboarding_config(
        path,
        env={"ONBOARDING_HTTP_TIMEOUT": "5", "ONBOARDING_STEP_API_KEY": "secret"},
    )
    assert config.step_service.base_url == "https://partner.example"
    assert config.step_service.timeout_seconds == 5.0
    assert config.step_service.api_key == "secret"
    assert config.use_real_integrations() is True


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_onboarding_config(tmp_path / "missing.yml", env={})


def test_mode_overrides_url():
    config = OnboardingConfig(integrations_mode="mock", step_service={"base_url": "https://partner.example"})
    assert config.use_real_integrations() is False
    assert OnboardingConfig(integrations_mode="REAL").use_real_integrations() is True


def test_selection_mock_mode():
    config = load_onboarding_config(env={"INTEGRATIONS_MODE": "mock"})
    assert isinstance(select_step_service(config), MockStepServiceClient)
    assert isinstance(select_coverage_client(config), LocalCoverageCatalogueClient)


def test_selection_real_mode():
    config = load_onboarding_config(env={"ONBOARDING_STEP_API_URL": "https://partner.example/"})
    step_service = select_step_service(config)
    assert isinstance(step_service, HttpStepServiceClient)
    assert step_service.base_url == "https://partner.example"
    assert isinstance(select_coverage_client(config), HttpCoverageCatalogueClient)
