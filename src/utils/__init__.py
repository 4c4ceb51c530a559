"""
Utility modules for the onboarding wizard
"""
from .config_loader import OnboardingConfig, StepServiceConfig, load_onboarding_config

__all__ = [
    'OnboardingConfig',
    'StepServiceConfig',
    'load_onboarding_config',
]
