"""browser — Chromium launch/connect and context lifecycle."""
from .manager import BrowserManager  # noqa: F401
