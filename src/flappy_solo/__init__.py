"""
flappy_solo: Single-screen endless pipe-dodging arcade game built on pygame.
"""

__version__ = "0.1.0"
