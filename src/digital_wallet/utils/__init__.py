"""Utility functions for the digital wallet."""

from .config import AppConfig, PhysicalCardConfig, MapConfig
from .validators import CardValidator, SettingsValidator

__all__ = [
    "AppConfig",
    "PhysicalCardConfig",
    "MapConfig",
    "CardValidator",
    "SettingsValidator"
]
