"""
Configuration management utilities for the One Link digital wallet.
"""

import uuid
from typing import Optional
from PyQt5.QtCore import QSettings

from .validators import SettingsValidator


def _seed_id(name: str) -> str:
    # Stable across launches so a persisted default can point at a seeded card
    return str(uuid.uuid5(uuid.NAMESPACE_URL, f"onelink:seed:{name}"))


class AppConfig:
    """Configuration manager for the digital wallet application."""

    # Application constants
    APP_NAME = "One Link"
    APP_VERSION = "1.0.0"
    ORGANIZATION = "OneLink"
    APP_IDENTIFIER = "DigitalWalletPrototype"

    # Window settings
    WINDOW_TITLE = "One Link"
    MIN_WIDTH = 420
    MIN_HEIGHT = 720

    # Persisted keys
    DEFAULT_CARD_KEY = "defaultCardId"

    # Built-in example cards: (id, kind name, title, details)
    SEED_CARDS = [
        (_seed_id("bank"), "bank", "Bank Card", "Visa **** 1234"),
        (_seed_id("loyalty"), "loyalty", "Loyalty Card", "Rewards: 150 points"),
    ]

    def __init__(self, settings: Optional[QSettings] = None) -> None:
        """Initialize configuration manager."""
        if settings is None:
            settings = QSettings(self.ORGANIZATION, self.APP_IDENTIFIER)
        self.settings = settings

    def value(self, key: str) -> Optional[str]:
        """Read a stored string, or None if it is absent or unusable."""
        return SettingsValidator.as_identifier(self.settings.value(key))

    def set_value(self, key: str, value: str) -> None:
        """Store a string and flush it to disk."""
        self.settings.setValue(key, value)
        self.settings.sync()

    def get_default_card_id(self) -> Optional[str]:
        """Get the persisted default card id."""
        return self.value(self.DEFAULT_CARD_KEY)

    def set_default_card_id(self, card_id: str) -> None:
        """Persist the default card id."""
        self.set_value(self.DEFAULT_CARD_KEY, card_id)

    def reset_to_defaults(self) -> None:
        """Reset all settings to default values."""
        self.settings.clear()
        self.settings.sync()


class PhysicalCardConfig:
    """Content and colors of the physical card shown on the wallet tab."""

    BRAND = "One-Link"
    MASKED_NUMBER = "**** **** **** 1234"
    HOLDER_LABEL = "CARDHOLDER NAME"
    HOLDER_NAME = "John Doe"
    EXPIRY_LABEL = "EXPIRES"
    EXPIRY = "12/25"

    GRADIENT_START = "#2E69FB"
    GRADIENT_END = "#141F9D"
    ACCENT = "#50CEC3"

    HEIGHT = 220
    CORNER_RADIUS = 20


class MapConfig:
    """Fixed map region and pins for the "Where is?" tab."""

    CENTER_LATITUDE = 51.345299
    CENTER_LONGITUDE = 12.391359
    LATITUDE_DELTA = 0.005
    LONGITUDE_DELTA = 0.005

    # (annotation type, latitude, longitude)
    LOCATIONS = [
        ("user", 51.345042, 12.391421),
        ("card", 51.345556, 12.391296),
    ]

    PANEL_HEIGHT = 300
    CORNER_RADIUS = 20
