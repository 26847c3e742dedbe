#!/usr/bin/env python3
"""
Unit tests for the digital wallet GUI components.
"""

import unittest
import sys
import os
import tempfile
import shutil
from unittest.mock import Mock, patch

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtWidgets import QApplication, QDialog, QDialogButtonBox
from PyQt5.QtCore import QSettings, Qt, QPoint
from PyQt5.QtTest import QTest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), 'src'))

from digital_wallet.gui.app import WalletApp
from digital_wallet.gui.widgets.card_dialog import CardDialog
from digital_wallet.gui.widgets.tracking_tab import TrackingTab
from digital_wallet.core.models import Card, CardKind
from digital_wallet.utils.config import AppConfig
import digital_wallet.main as launcher


class GuiTestCase(unittest.TestCase):
    """Shares one QApplication between all GUI tests."""

    @classmethod
    def setUpClass(cls):
        """Set up QApplication for all tests."""
        # Only create QApplication if it doesn't exist
        if not QApplication.instance():
            cls.app = QApplication([])
        else:
            cls.app = QApplication.instance()


class TestWalletApp(GuiTestCase):
    """Test cases for the WalletApp main window."""

    def setUp(self):
        """Set up test fixtures before each test method."""
        self.temp_dir = tempfile.mkdtemp()
        self.settings_path = os.path.join(self.temp_dir, "wallet.ini")
        self.main_window = self.make_window()

    def tearDown(self):
        """Clean up after each test method."""
        self.main_window.close()
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def make_window(self):
        # Keep test runs away from the real user settings
        config = AppConfig(QSettings(self.settings_path, QSettings.IniFormat))
        return WalletApp(config=config)

    def list_texts(self, window=None):
        card_list = (window or self.main_window).wallet_tab.card_list
        return [card_list.item(row).text() for row in range(card_list.count())]

    def test_window_initialization(self):
        """Test that the main window initializes correctly."""
        self.assertEqual(self.main_window.windowTitle(), "One Link")
        self.assertTrue(self.main_window.minimumSize().width() >= AppConfig.MIN_WIDTH)

    def test_tabs_creation(self):
        """Test that both tabs are created correctly."""
        self.assertEqual(self.main_window.tabs.count(), 2)
        tab_titles = [self.main_window.tabs.tabText(i) for i in range(self.main_window.tabs.count())]
        self.assertEqual(tab_titles, ["Wallet", "Where is?"])

    def test_seeded_cards_listed(self):
        """Test that the seeded cards are shown in order."""
        texts = self.list_texts()
        self.assertEqual(len(texts), 2)
        self.assertTrue(texts[0].startswith("Bank Card"))
        self.assertIn("Visa **** 1234", texts[0])
        self.assertTrue(texts[1].startswith("Loyalty Card"))
        self.assertNotIn("✔", "".join(texts))

    @patch('digital_wallet.gui.app.QMessageBox.information')
    def test_activate_card(self, mock_info):
        """Test clicking a card activates it and confirms to the user."""
        card_id = self.main_window.wallet_tab.card_id_at(1)
        self.main_window.wallet_tab.card_activated.emit(card_id)

        self.assertEqual(self.main_window.card_store.selected_id, card_id)
        mock_info.assert_called_once()
        self.assertEqual(mock_info.call_args[0][1], "Card Activated")
        self.assertEqual(mock_info.call_args[0][2], "You have successfully activated Loyalty Card.")
        self.assertIn("✔", self.list_texts()[1])
        self.assertNotIn("✔", self.list_texts()[0])

    @patch('digital_wallet.gui.app.QMessageBox.warning')
    def test_activate_unknown_card(self, mock_warning):
        """Test activating a missing card shows a warning."""
        self.main_window.wallet_tab.card_activated.emit("missing")

        mock_warning.assert_called_once()
        self.assertIsNone(self.main_window.card_store.selected_id)

    @patch('digital_wallet.gui.app.QMessageBox.information')
    def test_item_click_emits_activation(self, mock_info):
        """Test that a mouse click on a list row activates the card."""
        card_list = self.main_window.wallet_tab.card_list
        self.main_window.show()
        QApplication.processEvents()
        rect = card_list.visualItemRect(card_list.item(0))
        QTest.mouseClick(card_list.viewport(), Qt.LeftButton, pos=rect.center())

        self.assertEqual(self.main_window.card_store.selected_id,
                         self.main_window.wallet_tab.card_id_at(0))

    def test_set_default_from_context_menu(self):
        """Test the context menu action persists the default card."""
        card_id = self.main_window.wallet_tab.card_id_at(1)
        menu = self.main_window.wallet_tab.build_context_menu(card_id)
        actions = {action.text(): action for action in menu.actions()}
        self.assertEqual(list(actions), ["Set as Default", "Edit Card Info"])

        actions["Set as Default"].trigger()

        self.assertEqual(self.main_window.card_store.selected_id, card_id)
        self.assertEqual(self.main_window.config.get_default_card_id(), card_id)

    def test_default_selected_on_next_launch(self):
        """Test that a new window activates the stored default card."""
        card_id = self.main_window.wallet_tab.card_id_at(1)
        self.main_window.wallet_tab.set_default_requested.emit(card_id)
        self.main_window.close()

        window = self.make_window()
        try:
            self.assertEqual(window.card_store.selected_id, card_id)
            self.assertIn("✔", self.list_texts(window)[1])
        finally:
            window.close()

    @patch('digital_wallet.gui.app.CardDialog')
    def test_add_card(self, mock_dialog_class):
        """Test adding a card through the dialog."""
        mock_dialog = Mock()
        mock_dialog.exec_.return_value = QDialog.Accepted
        mock_dialog.get_card_data.return_value = (CardKind.OTHER, "Library", "Member 42")
        mock_dialog_class.return_value = mock_dialog

        self.main_window.wallet_tab.add_button.click()

        self.assertEqual(len(self.main_window.card_store), 3)
        texts = self.list_texts()
        self.assertEqual(len(texts), 3)
        self.assertTrue(texts[2].startswith("Library"))

    @patch('digital_wallet.gui.app.CardDialog')
    def test_add_card_cancelled(self, mock_dialog_class):
        """Test cancelling the add dialog changes nothing."""
        mock_dialog = Mock()
        mock_dialog.exec_.return_value = QDialog.Rejected
        mock_dialog_class.return_value = mock_dialog

        self.main_window.wallet_tab.add_card_requested.emit()

        self.assertEqual(len(self.main_window.card_store), 2)
        mock_dialog.get_card_data.assert_not_called()

    @patch('digital_wallet.gui.app.QMessageBox.warning')
    @patch('digital_wallet.gui.app.CardDialog')
    def test_add_card_invalid(self, mock_dialog_class, mock_warning):
        """Test that an empty name is rejected with a warning."""
        mock_dialog = Mock()
        mock_dialog.exec_.return_value = QDialog.Accepted
        mock_dialog.get_card_data.return_value = (CardKind.BANK, "", "x")
        mock_dialog_class.return_value = mock_dialog

        self.main_window.wallet_tab.add_card_requested.emit()

        mock_warning.assert_called_once()
        self.assertEqual(len(self.main_window.card_store), 2)

    @patch('digital_wallet.gui.app.CardDialog')
    def test_edit_card(self, mock_dialog_class):
        """Test editing a card keeps its position."""
        card_id = self.main_window.wallet_tab.card_id_at(0)
        mock_dialog = Mock()
        mock_dialog.exec_.return_value = QDialog.Accepted
        mock_dialog.get_card_data.return_value = (CardKind.LOYALTY, "Renamed", "new details")
        mock_dialog_class.return_value = mock_dialog

        self.main_window.wallet_tab.edit_card_requested.emit(card_id)

        card = self.main_window.card_store.get_card(card_id)
        mock_dialog_class.assert_called_once_with(self.main_window, card)
        self.assertEqual(card.title, "Renamed")
        self.assertEqual(card.kind, CardKind.LOYALTY)
        self.assertEqual(self.main_window.card_store.index_of(card_id), 0)
        self.assertTrue(self.list_texts()[0].startswith("Renamed"))

    @patch('digital_wallet.gui.app.QMessageBox.warning')
    @patch('digital_wallet.gui.app.CardDialog')
    def test_edit_unknown_card(self, mock_dialog_class, mock_warning):
        """Test editing a missing card shows the error message."""
        self.main_window.wallet_tab.edit_card_requested.emit("missing")

        mock_dialog_class.assert_not_called()
        mock_warning.assert_called_once()
        self.assertEqual(mock_warning.call_args[0][2], "Error loading card info.")

    def test_physical_card_opens_map(self):
        """Test that clicking the physical card switches to the map tab."""
        self.main_window.show()
        QApplication.processEvents()
        self.assertEqual(self.main_window.tabs.currentIndex(), 0)
        QTest.mouseClick(self.main_window.wallet_tab.physical_card, Qt.LeftButton, pos=QPoint(20, 20))
        self.assertEqual(self.main_window.tabs.currentIndex(), WalletApp.TRACKING_TAB_INDEX)

    def test_store_messages_shown_in_status_bar(self):
        """Test store log messages reach the status bar."""
        self.main_window.card_store.set_default(self.main_window.wallet_tab.card_id_at(0))
        self.assertEqual(self.main_window.statusBar().currentMessage(), "Default card set: Bank Card")


class TestCardDialog(GuiTestCase):
    """Test cases for the add / edit dialog."""

    def test_add_mode(self):
        dialog = CardDialog()
        self.assertEqual(dialog.windowTitle(), "Add Card")
        self.assertEqual(dialog.confirm_button.text(), "Add")
        self.assertFalse(dialog.confirm_button.isEnabled())
        self.assertEqual([dialog.kind_combo.itemText(i) for i in range(dialog.kind_combo.count())],
                         ["Bank Card", "Loyalty Card", "Other"])

    def test_confirm_enabled_with_title(self):
        dialog = CardDialog()
        dialog.title_input.setText("Gym")
        self.assertTrue(dialog.confirm_button.isEnabled())
        dialog.title_input.setText("   ")
        self.assertTrue(dialog.confirm_button.isEnabled())
        dialog.title_input.setText("")
        self.assertFalse(dialog.confirm_button.isEnabled())

    def test_get_card_data(self):
        dialog = CardDialog()
        dialog.kind_combo.setCurrentIndex(2)
        dialog.title_input.setText("Library")
        dialog.details_input.setText("Member 42")
        self.assertEqual(dialog.get_card_data(), (CardKind.OTHER, "Library", "Member 42"))

    def test_edit_mode_prefilled(self):
        card = Card(CardKind.LOYALTY, "Coffee", "9 stamps")
        dialog = CardDialog(card=card)
        self.assertEqual(dialog.windowTitle(), "Edit Card")
        self.assertEqual(dialog.button_box.button(QDialogButtonBox.Ok).text(), "Done")
        self.assertTrue(dialog.confirm_button.isEnabled())
        self.assertEqual(dialog.get_card_data(), (CardKind.LOYALTY, "Coffee", "9 stamps"))


class TestLauncher(unittest.TestCase):
    """Test cases for the application entry point."""

    @patch('digital_wallet.main.sys.exit')
    @patch('digital_wallet.main.WalletApp')
    @patch('digital_wallet.main.QApplication')
    def test_main_uses_fusion_style(self, mock_app_cls, mock_window_cls, mock_exit):
        launcher.main()

        mock_app_cls.return_value.setStyle.assert_called_once_with("Fusion")
        mock_window_cls.return_value.show.assert_called_once()
        mock_exit.assert_called_once_with(mock_app_cls.return_value.exec_.return_value)

    def test_single_entry_point(self):
        import digital_wallet.gui.app as app_module
        self.assertFalse(hasattr(app_module, "main"))


class TestTrackingTab(GuiTestCase):
    """Test cases for the map tab."""

    def test_pins_drawn(self):
        tab = TrackingTab()
        self.assertEqual(len(tab.map_view.pin_items), 2)
        self.assertEqual(set(tab.map_view.pin_items), {loc.id for loc in tab.locations})

    def test_pins_inside_panel(self):
        tab = TrackingTab()
        tab.map_view.draw_map(400, 300)
        scene_rect = tab.map_view.scene().sceneRect()
        for pin in tab.map_view.pin_items.values():
            self.assertTrue(scene_rect.contains(pin.rect().center()))


if __name__ == '__main__':
    unittest.main()
