"""Turn-based arena auto-battler played in the terminal, driven by JSON game data."""

__version__ = "1.0.0"