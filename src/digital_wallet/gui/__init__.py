"""GUI module for the digital wallet."""

from .app import WalletApp

__all__ = ['WalletApp']
