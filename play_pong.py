#!/usr/bin/env python3
"""
Main script to launch Pixel Pong with PyGame graphical interface
"""

import sys

from pixel_pong.gui.game_app import main

if __name__ == "__main__":
    main(sys.argv[1:])
