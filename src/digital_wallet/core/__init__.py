"""Core wallet state and data."""

from .models import Card, CardKind
from .card_store import CardStore, WalletError, InvalidCardError, CardNotFoundError
from .tracking import AnnotationType, MapRegion, TrackingLocation, default_region, dummy_locations

__all__ = [
    "Card",
    "CardKind",
    "CardStore",
    "WalletError",
    "InvalidCardError",
    "CardNotFoundError",
    "AnnotationType",
    "MapRegion",
    "TrackingLocation",
    "default_region",
    "dummy_locations"
]
