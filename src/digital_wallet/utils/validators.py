"""
Validation utilities for the digital wallet.
"""

from typing import Any, Optional


class CardValidator:
    """Utilities for validating card input."""

    @staticmethod
    def is_valid_title(title: Optional[str]) -> bool:
        """
        Check that a card title can be shown in the wallet.

        Args:
            title: Title text entered by the user

        Returns:
            bool: True if the title is a non-empty string
        """
        if not isinstance(title, str):
            return False
        return bool(title)

    @staticmethod
    def clean_details(details: Optional[str]) -> str:
        """Normalize the free-form details field."""
        if details is None:
            return ""
        return str(details)


class SettingsValidator:
    """Utilities for values read back from persistent settings."""

    @staticmethod
    def as_identifier(value: Any) -> Optional[str]:
        """
        Interpret a stored settings value as a card identifier.

        Returns:
            The identifier, or None for absent, empty or non-string values
        """
        if not isinstance(value, str):
            return None
        value = value.strip()
        return value or None
