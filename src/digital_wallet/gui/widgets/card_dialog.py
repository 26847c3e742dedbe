"""Add / edit card dialog."""

from PyQt5.QtWidgets import (QDialog, QVBoxLayout, QGroupBox, QFormLayout,
                            QComboBox, QLineEdit, QDialogButtonBox)

from ...core.models import CardKind
from ...utils.validators import CardValidator


class CardDialog(QDialog):
    """Form for creating a new card or editing an existing one."""

    def __init__(self, parent=None, card=None):
        super().__init__(parent)
        self.card = card
        self.setup_ui()

        if card is not None:
            self.load_card(card)
        self._update_confirm_state()

    @property
    def is_edit_mode(self):
        return self.card is not None

    def setup_ui(self):
        """Set up the dialog UI."""
        self.setWindowTitle("Edit Card" if self.is_edit_mode else "Add Card")
        self.setMinimumWidth(360)
        layout = QVBoxLayout()

        info_group = QGroupBox("Card Info")
        form_layout = QFormLayout()

        self.kind_combo = QComboBox()
        for kind in CardKind:
            self.kind_combo.addItem(kind.label, kind)
        form_layout.addRow("Card Type:", self.kind_combo)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Card Name")
        self.title_input.textChanged.connect(self._update_confirm_state)
        form_layout.addRow("Card Name:", self.title_input)

        self.details_input = QLineEdit()
        self.details_input.setPlaceholderText("Details")
        form_layout.addRow("Details:", self.details_input)

        info_group.setLayout(form_layout)
        layout.addWidget(info_group)

        self.button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.confirm_button = self.button_box.button(QDialogButtonBox.Ok)
        self.confirm_button.setText("Done" if self.is_edit_mode else "Add")
        self.button_box.accepted.connect(self.accept)
        self.button_box.rejected.connect(self.reject)
        layout.addWidget(self.button_box)

        self.setLayout(layout)

    def load_card(self, card):
        """Fill the form from an existing card."""
        for index in range(self.kind_combo.count()):
            if self.kind_combo.itemData(index) == card.kind:
                self.kind_combo.setCurrentIndex(index)
                break
        self.title_input.setText(card.title)
        self.details_input.setText(card.details)

    def _update_confirm_state(self):
        """Only allow confirming when the card has a name."""
        self.confirm_button.setEnabled(CardValidator.is_valid_title(self.title_input.text()))

    def get_card_data(self):
        """Return the entered (kind, title, details)."""
        return (
            self.kind_combo.currentData(),
            self.title_input.text(),
            self.details_input.text()
        )
