"""
One Link Digital Wallet

A desktop prototype of a digital wallet: a physical card, a list of
user-added digital cards with a persisted default, and a map showing
where the physical card is.
"""

__version__ = "1.0.0"

from .core.models import Card, CardKind
from .core.card_store import CardStore, InvalidCardError, CardNotFoundError
from .utils.config import AppConfig

__all__ = [
    "Card",
    "CardKind",
    "CardStore",
    "InvalidCardError",
    "CardNotFoundError",
    "AppConfig"
]
