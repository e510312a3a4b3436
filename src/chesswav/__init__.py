"""chesswav: a chess position engine driven by algebraic notation."""

__version__ = "0.1.0"
