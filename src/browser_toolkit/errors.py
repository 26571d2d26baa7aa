"""Errors raised by the toolkit itself.

Failures coming from Playwright or the filesystem are re-raised unchanged;
these cover calls made before the manager holds what they need.
"""
from enum import Enum


class LifecycleStage(Enum):
    """Which piece of browser state an operation found missing."""
    BROWSER = "browser"
    CONTEXT = "context"
    PAGE = "page"


class LifecycleError(Exception):
    """Exception carrying the LifecycleStage that was not ready."""

    def __init__(self, stage: LifecycleStage, message: str = ""):
        self.stage = stage
        super().__init__(message or f"no {stage.value} available")
