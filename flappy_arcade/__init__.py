"""Flappy Bird inspired arcade game implemented with pygame."""

from __future__ import annotations

from .config import GameSettings
from .session import GameSession, Phase

__all__ = ["GameSession", "GameSettings", "Phase"]
__version__ = "0.1.0"
