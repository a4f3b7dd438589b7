#!/usr/bin/env python3
"""
TUNNEL RUNNER Launcher
=======================
Run this script to start the game.
"""

import sys

from tunnel_runner.main import main

if __name__ == "__main__":
    sys.exit(main())
