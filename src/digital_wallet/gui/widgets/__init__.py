"""GUI widgets module."""

from .wallet_tab import WalletTab
from .tracking_tab import TrackingTab, MapView
from .physical_card import PhysicalCardWidget
from .card_dialog import CardDialog

__all__ = ['WalletTab', 'TrackingTab', 'MapView', 'PhysicalCardWidget', 'CardDialog']
