#!/usr/bin/env python3
"""
OUROBOROS Launcher
===================
Run this script to start the game.
"""

from ouroboros.main import main

if __name__ == "__main__":
    main()
