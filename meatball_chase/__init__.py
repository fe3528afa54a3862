"""A top-down maze game about a pug chasing meatballs, with windowless game logic."""

__version__ = "0.1.0"
__all__ = ["config", "level", "dots", "game"]