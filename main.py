#!/usr/bin/env python3
"""
One Link Digital Wallet - Main Entry Point

A desktop prototype of a digital wallet with a physical card, user-added
digital cards with a remembered default, and a "Where is?" map.
"""

from src.digital_wallet.main import main

if __name__ == "__main__":
    main()
