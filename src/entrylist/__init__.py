"""Entry list editor with selective, per-control updates."""

__version__ = "0.1.0"
