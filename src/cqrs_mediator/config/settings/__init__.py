"""Config settings – 12-factor env-based configuration."""
from cqrs_mediator.config.settings.base import AppSettings, Settings
from cqrs_mediator.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["AppSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
