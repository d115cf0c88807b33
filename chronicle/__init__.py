"""chronicle - character auto-history for roguelike game sessions."""

__version__ = "0.1.0"
