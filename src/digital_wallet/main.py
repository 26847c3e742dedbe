"""
Main entry point for the One Link digital wallet.
"""

import sys
from PyQt5.QtWidgets import QApplication
from .gui.app import WalletApp


def main():
    """Main function to start the application."""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = WalletApp()
    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
