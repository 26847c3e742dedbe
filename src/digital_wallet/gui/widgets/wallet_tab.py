"""Wallet tab widget."""

from PyQt5.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QGroupBox,
                            QListWidget, QListWidgetItem, QLabel, QPushButton,
                            QMenu, QAbstractItemView)
from PyQt5.QtGui import QFont
from PyQt5.QtCore import Qt, QSize, pyqtSignal

from .physical_card import PhysicalCardWidget


class WalletTab(QWidget):
    """Physical card plus the list of digital cards."""

    # Signals
    card_activated = pyqtSignal(str)  # card id
    set_default_requested = pyqtSignal(str)  # card id
    edit_card_requested = pyqtSignal(str)  # card id
    add_card_requested = pyqtSignal()
    physical_card_clicked = pyqtSignal()

    CHECK_MARK = "✔"
    TITLE_ROLE = Qt.UserRole + 1
    DETAILS_ROLE = Qt.UserRole + 2

    def __init__(self):
        super().__init__()
        self.selected_id = None
        self.setup_ui()

    def setup_ui(self):
        """Set up the wallet tab UI."""
        layout = QVBoxLayout()

        # Header with add button
        header_layout = QHBoxLayout()
        header_label = QLabel("One Link")
        header_label.setFont(QFont("Helvetica", 14, QFont.Bold))
        header_layout.addWidget(header_label)
        header_layout.addStretch()

        self.add_button = QPushButton("+")
        self.add_button.setToolTip("Add Card")
        self.add_button.setFixedWidth(36)
        self.add_button.setStyleSheet("QPushButton { font-weight: bold; font-size: 16px; }")
        self.add_button.clicked.connect(self.add_card_requested.emit)
        header_layout.addWidget(self.add_button)
        layout.addLayout(header_layout)

        self.physical_card = PhysicalCardWidget()
        self.physical_card.clicked.connect(self.physical_card_clicked.emit)
        layout.addWidget(self.physical_card)

        # Digital cards
        cards_group = QGroupBox("Digital Cards")
        cards_layout = QVBoxLayout()

        self.card_list = QListWidget()
        self.card_list.setSelectionMode(QAbstractItemView.NoSelection)
        self.card_list.setSpacing(6)
        self.card_list.setContextMenuPolicy(Qt.CustomContextMenu)
        self.card_list.customContextMenuRequested.connect(self._show_context_menu)
        self.card_list.itemClicked.connect(self._on_item_clicked)
        self.card_list.setStyleSheet(
            "QListWidget::item { background-color: white; color: black; "
            "border: 1px solid #e0e0e0; border-radius: 10px; padding: 10px; }"
        )
        cards_layout.addWidget(self.card_list)

        hint = QLabel("Right-click a card to set it as default or edit it.")
        hint.setStyleSheet("QLabel { color: gray; }")
        cards_layout.addWidget(hint)

        cards_group.setLayout(cards_layout)
        layout.addWidget(cards_group)

        self.setLayout(layout)

    def populate_cards(self, cards, selected_id=None):
        """Rebuild the card list in display order."""
        self.selected_id = selected_id
        self.card_list.clear()
        for card in cards:
            item = QListWidgetItem()
            item.setData(Qt.UserRole, card.id)
            item.setSizeHint(QSize(0, 64))
            self._render_item(item, card.title, card.details)
            self.card_list.addItem(item)

    def set_selected(self, card_id):
        """Move the check mark to the given card."""
        self.selected_id = card_id
        for row in range(self.card_list.count()):
            item = self.card_list.item(row)
            title = item.data(self.TITLE_ROLE)
            details = item.data(self.DETAILS_ROLE)
            self._render_item(item, title, details)

    def _render_item(self, item, title, details):
        item.setData(self.TITLE_ROLE, title)
        item.setData(self.DETAILS_ROLE, details)
        text = f"{title}\n{details}"
        if item.data(Qt.UserRole) == self.selected_id:
            text = f"{title}   {self.CHECK_MARK}\n{details}"
        item.setText(text)

    def card_id_at(self, row):
        """Card id shown in the given row, or None."""
        item = self.card_list.item(row)
        return item.data(Qt.UserRole) if item is not None else None

    def _on_item_clicked(self, item):
        card_id = item.data(Qt.UserRole)
        if card_id:
            self.card_activated.emit(card_id)

    def build_context_menu(self, card_id):
        """Menu with the per-card actions."""
        menu = QMenu(self)
        default_action = menu.addAction("Set as Default")
        default_action.triggered.connect(lambda: self.set_default_requested.emit(card_id))
        edit_action = menu.addAction("Edit Card Info")
        edit_action.triggered.connect(lambda: self.edit_card_requested.emit(card_id))
        return menu

    def _show_context_menu(self, position):
        item = self.card_list.itemAt(position)
        if item is None:
            return
        menu = self.build_context_menu(item.data(Qt.UserRole))
        menu.exec_(self.card_list.viewport().mapToGlobal(position))
