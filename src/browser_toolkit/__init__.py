"""browser-toolkit — thin Playwright wrappers for scripted browsing.

Provides a browser/context lifecycle manager, a page-interaction helper
with randomized pacing waits, a file/directory helper, and structured
JSONL action logging.
"""
from .browser.manager import BrowserManager  # noqa: F401
from .errors import LifecycleStage, LifecycleError  # noqa: F401
from .files.manager import FileManager  # noqa: F401
from .page.handler import PageHandler  # noqa: F401
