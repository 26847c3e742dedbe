"""
Card collection state for the wallet.

The store owns the ordered list of digital cards, the card activated in the
current session and the default card id persisted through ``AppConfig``.
Listeners are notified through Qt signals.
"""

from typing import Iterator, List, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from .models import Card, CardKind
from ..utils.config import AppConfig
from ..utils.validators import CardValidator


class WalletError(Exception):
    """Base class for wallet errors."""


class InvalidCardError(WalletError, ValueError):
    """Raised when card input cannot be accepted."""


class CardNotFoundError(WalletError, LookupError):
    """Raised when an operation references an unknown card id."""

    def __init__(self, card_id: str) -> None:
        super().__init__(f"No card with id {card_id!r}")
        self.card_id = card_id


class CardStore(QObject):
    """Ordered collection of digital cards with selection and default."""
    cards_changed = pyqtSignal()
    selection_changed = pyqtSignal(str)  # selected card id
    default_changed = pyqtSignal(str)  # default card id
    update_signal = pyqtSignal(str)  # log messages

    def __init__(self, config: Optional[AppConfig] = None, seed: bool = True, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.config = config if config is not None else AppConfig()
        self._cards: List[Card] = []
        self._selected_id: Optional[str] = None
        self._default_resolved = False

        if seed:
            for card_id, kind, title, details in AppConfig.SEED_CARDS:
                self._cards.append(Card(CardKind.from_value(kind), title, details, card_id=card_id))

    def log(self, message: str) -> None:
        """Emit a log message to listeners."""
        self.update_signal.emit(message)

    @property
    def cards(self) -> List[Card]:
        """Cards in display order."""
        return list(self._cards)

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected_card(self) -> Optional[Card]:
        if self._selected_id is None:
            return None
        return self.get_card(self._selected_id)

    @property
    def default_id(self) -> Optional[str]:
        """The persisted default card id, which may be stale."""
        return self.config.get_default_card_id()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def index_of(self, card_id: str) -> int:
        """Position of a card in display order, or -1 if absent."""
        for index, card in enumerate(self._cards):
            if card.id == card_id:
                return index
        return -1

    def get_card(self, card_id: str) -> Optional[Card]:
        index = self.index_of(card_id)
        return self._cards[index] if index >= 0 else None

    def _require_card(self, card_id: str) -> Card:
        card = self.get_card(card_id)
        if card is None:
            self.log(f"Card not found: {card_id}")
            raise CardNotFoundError(card_id)
        return card

    @staticmethod
    def _validate(kind, title: str) -> CardKind:
        if not CardValidator.is_valid_title(title):
            raise InvalidCardError("Card name must not be empty")
        try:
            return CardKind.from_value(kind)
        except ValueError as e:
            raise InvalidCardError(str(e)) from e

    def add_card(self, kind, title: str, details: str = "") -> Card:
        """
        Append a new card to the end of the collection.

        Args:
            kind: CardKind member, or its label or name
            title: Display name, must not be empty
            details: Free-form details

        Returns:
            Card: The created card

        Raises:
            InvalidCardError: if the title is empty or the kind is unknown
        """
        card_kind = self._validate(kind, title)
        card = Card(card_kind, title, CardValidator.clean_details(details))
        while self.get_card(card.id) is not None:
            card = Card(card_kind, title, card.details)
        self._cards.append(card)

        self.log(f"Added card: {card.title}")
        self.cards_changed.emit()
        return card

    def update_card(self, card_id: str, kind, title: str, details: str = "") -> Card:
        """
        Replace a card's kind, title and details in place.

        Raises:
            CardNotFoundError: if no card has the given id
            InvalidCardError: if the title is empty or the kind is unknown
        """
        card = self._require_card(card_id)
        card_kind = self._validate(kind, title)

        card.kind = card_kind
        card.title = title
        card.details = CardValidator.clean_details(details)

        self.log(f"Updated card: {card.title}")
        self.cards_changed.emit()
        return card

    def select_card(self, card_id: str) -> Card:
        """
        Activate a card for the current session.

        Raises:
            CardNotFoundError: if no card has the given id
        """
        card = self._require_card(card_id)
        self._set_selected(card.id)
        self.log(f"Activated card: {card.title}")
        return card

    def set_default(self, card_id: str) -> Card:
        """
        Persist a card as the default and activate it.

        Raises:
            CardNotFoundError: if no card has the given id
        """
        card = self._require_card(card_id)
        self.config.set_default_card_id(card.id)
        self.default_changed.emit(card.id)
        self._set_selected(card.id)
        self.log(f"Default card set: {card.title}")
        return card

    def resolve_default_on_startup(self) -> Optional[str]:
        """
        Activate the persisted default card if nothing is selected yet.

        Only the first call has any effect. A missing or stale default
        leaves the selection unset.

        Returns:
            The selected card id, or None
        """
        if self._default_resolved:
            return self._selected_id
        self._default_resolved = True

        if self._selected_id is not None:
            return self._selected_id

        default_id = self.config.get_default_card_id()
        if default_id is None:
            return None

        card = self.get_card(default_id)
        if card is None:
            self.log("Stored default card is no longer available")
            return None

        self._set_selected(card.id)
        self.log(f"Activated default card: {card.title}")
        return card.id

    def _set_selected(self, card_id: str) -> None:
        changed = card_id != self._selected_id
        self._selected_id = card_id
        if changed:
            self.selection_changed.emit(card_id)
