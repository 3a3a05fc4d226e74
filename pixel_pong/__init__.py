"""
Pixel Pong - real-time Pong against a ball-tracking computer paddle
"""

__version__ = "0.1.0"
