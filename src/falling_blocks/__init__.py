"""Falling Blocks: a falling-block puzzle engine with pygame and gymnasium hosts."""

__version__ = "0.1.0"
