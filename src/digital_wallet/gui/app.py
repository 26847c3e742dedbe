"""Main application window for the One Link digital wallet."""

from PyQt5.QtWidgets import QMainWindow, QTabWidget, QMessageBox, QDialog

from ..core.card_store import CardStore, CardNotFoundError, InvalidCardError
from ..utils.config import AppConfig
from .widgets.wallet_tab import WalletTab
from .widgets.tracking_tab import TrackingTab
from .widgets.card_dialog import CardDialog


class WalletApp(QMainWindow):
    """Main application window for the digital wallet."""

    WALLET_TAB_INDEX = 0
    TRACKING_TAB_INDEX = 1

    def __init__(self, config=None):
        super().__init__()

        self.config = config if config is not None else AppConfig()
        self.card_store = CardStore(self.config, parent=self)

        # Set up the UI
        self.init_ui()

        # Activate the stored default card
        self.card_store.resolve_default_on_startup()
        self.refresh_cards()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle(AppConfig.WINDOW_TITLE)
        self.setMinimumSize(AppConfig.MIN_WIDTH, AppConfig.MIN_HEIGHT)

        # Create tabs
        self.tabs = QTabWidget()
        self.setCentralWidget(self.tabs)

        self.wallet_tab = WalletTab()
        self.tracking_tab = TrackingTab()

        self.tabs.addTab(self.wallet_tab, "Wallet")
        self.tabs.addTab(self.tracking_tab, "Where is?")

        self._connect_signals()

    def _connect_signals(self):
        """Connect all widget and store signals to their handlers."""
        # Wallet tab signals
        self.wallet_tab.card_activated.connect(self._handle_card_activated)
        self.wallet_tab.set_default_requested.connect(self._handle_set_default)
        self.wallet_tab.edit_card_requested.connect(self._handle_edit_card)
        self.wallet_tab.add_card_requested.connect(self._handle_add_card)
        self.wallet_tab.physical_card_clicked.connect(self._show_tracking)

        # Store signals
        self.card_store.cards_changed.connect(self.refresh_cards)
        self.card_store.selection_changed.connect(self.wallet_tab.set_selected)
        self.card_store.update_signal.connect(self.log_message)

    def refresh_cards(self):
        """Re-render the card list from the store."""
        self.wallet_tab.populate_cards(self.card_store.cards, self.card_store.selected_id)

    def log_message(self, message):
        """Show a log message in the status bar."""
        self.statusBar().showMessage(message, 5000)

    def _handle_card_activated(self, card_id):
        """Activate a card and confirm it to the user."""
        try:
            card = self.card_store.select_card(card_id)
        except CardNotFoundError:
            QMessageBox.warning(self, "Card Not Found", "Error loading card info.")
            return

        QMessageBox.information(
            self,
            "Card Activated",
            f"You have successfully activated {card.title}."
        )

    def _handle_set_default(self, card_id):
        """Persist the card as default."""
        try:
            self.card_store.set_default(card_id)
        except CardNotFoundError:
            QMessageBox.warning(self, "Card Not Found", "Error loading card info.")

    def _handle_add_card(self):
        """Show the add dialog and append the new card."""
        dialog = CardDialog(self)
        if dialog.exec_() != QDialog.Accepted:
            return

        kind, title, details = dialog.get_card_data()
        try:
            self.card_store.add_card(kind, title, details)
        except InvalidCardError as e:
            QMessageBox.warning(self, "Invalid Card", str(e))

    def _handle_edit_card(self, card_id):
        """Show the edit dialog for a card and apply the changes."""
        card = self.card_store.get_card(card_id)
        if card is None:
            QMessageBox.warning(self, "Card Not Found", "Error loading card info.")
            return

        dialog = CardDialog(self, card)
        if dialog.exec_() != QDialog.Accepted:
            return

        kind, title, details = dialog.get_card_data()
        try:
            self.card_store.update_card(card_id, kind, title, details)
        except CardNotFoundError:
            QMessageBox.warning(self, "Card Not Found", "Error loading card info.")
        except InvalidCardError as e:
            QMessageBox.warning(self, "Invalid Card", str(e))

    def _show_tracking(self):
        """Switch to the map tab."""
        self.tabs.setCurrentIndex(self.TRACKING_TAB_INDEX)

