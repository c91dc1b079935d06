"""
Flappy: a side-scrolling pipe-dodging arcade game on pygame.
"""

__version__ = "1.0.0"
