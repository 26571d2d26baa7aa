"""page — navigation and element interaction with pacing waits."""
from .handler import PageHandler  # noqa: F401
from .pacing import (  # noqa: F401
    random_wait_ms,
    NAVIGATION_WAIT,
    CLICK_WAIT,
    TYPING_WAIT,
    DEFAULT_WAIT,
)
