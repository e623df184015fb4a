"""Outbound engine notifications for presentation layers and agents."""

from .bus import EventBus
from . import names

__all__ = ["EventBus", "names"]
