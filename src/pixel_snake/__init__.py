# src/pixel_snake/__init__.py
"""Pixel Snake: grid snake with power-ups, wrap mode and per-mode top-5 scores."""

from .session import Session, Snapshot
from .models import Mode, SessionState

__all__ = ["Session", "Snapshot", "Mode", "SessionState"]
