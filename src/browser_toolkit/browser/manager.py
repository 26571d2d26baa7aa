"""Chromium browser, context, and page lifecycle.

The manager holds at most one browser, one current context, and one
current page. A Playwright driver may be injected; otherwise one is
started on first use and stopped again by ``close_browser``.
"""
import logging
from typing import Any

from playwright.sync_api import sync_playwright

from ..errors import LifecycleError, LifecycleStage

log = logging.getLogger(__name__)


class BrowserManager:
    """Manages a Chromium connection and its current context/page.

    Usable as a context manager; leaving the block closes everything.
    """

    def __init__(self, playwright: Any = None):
        self.browser = None
        self.context = None
        self.page = None
        self._playwright = playwright
        self._owns_playwright = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close_browser()

    def launch_browser(self, launch_options: dict | None = None,
                       context_options: dict | None = None):
        """Launch Chromium, open a context and a page. Returns the page."""
        self._release_held_browser()
        try:
            chromium = self._driver().chromium
            self.browser = chromium.launch(**(launch_options or {}))
            self.context = self.browser.new_context(**(context_options or {}))
            self.page = self.context.new_page()
            log.info("Browser launched")
            return self.page
        except Exception as e:
            log.error(f"Error launching browser: {e}")
            raise

    def connect_over_cdp(self, endpoint: str, context_index: int = 0):
        """Attach to a running Chromium over CDP and open a page.

        ``endpoint`` is the HTTP or WebSocket address of the remote
        debugging port. The page is opened in the existing context at
        ``context_index``.
        """
        self._release_held_browser()
        try:
            self.browser = self._driver().chromium.connect_over_cdp(endpoint)
            contexts = self.browser.contexts
            if not 0 <= context_index < len(contexts):
                raise LifecycleError(
                    LifecycleStage.CONTEXT,
                    f"no context at index {context_index} ({len(contexts)} available)",
                )
            self.context = contexts[context_index]
            self.page = self.context.new_page()
            log.info(f"Connected to endpoint: {endpoint}, context index: {context_index}")
            return self.page
        except Exception as e:
            log.error(f"Error connecting to endpoint {endpoint}: {e}")
            raise

    def new_context(self, context_options: dict | None = None):
        """Create a context unless one is already held; return the current one."""
        if self.browser is None:
            raise LifecycleError(LifecycleStage.BROWSER, "launch or connect a browser first")
        try:
            if self.context is None:
                self.context = self.browser.new_context(**(context_options or {}))
                log.info("New context created")
            else:
                log.warning("Current context needs to close before creating a new one")
            return self.context
        except Exception as e:
            log.error(f"Error creating context: {e}")
            raise

    def new_page(self, isolate_page: bool = False):
        """Open a page in the current context.

        With ``isolate_page`` the new page is returned without replacing
        ``self.page``.
        """
        if self.context is None:
            raise LifecycleError(LifecycleStage.CONTEXT, "create a context first")
        try:
            if isolate_page:
                log.info("Creating new isolated page")
                return self.context.new_page()
            self.page = self.context.new_page()
            log.info("New page created")
            return self.page
        except Exception as e:
            log.error(f"Error creating new page: {e}")
            raise

    def close_context(self) -> None:
        """Close the current context. Never raises."""
        if self.context is None:
            return
        try:
            self.context.close()
            log.info("Closed context")
        except Exception as e:
            log.error(f"Error closing context: {e}")
        finally:
            self.context = None
            self.page = None

    def close_browser(self) -> None:
        """Close the context, the browser, and an owned driver. Never raises."""
        self._close_held_browser()
        if self._owns_playwright and self._playwright is not None:
            try:
                self._playwright.stop()
            except Exception as e:
                log.warning(f"Failed to stop Playwright cleanly: {e}")
            self._playwright = None
            self._owns_playwright = False

    def _close_held_browser(self) -> None:
        if self.browser is None:
            return
        self.close_context()
        try:
            self.browser.close()
            log.info("Closed browser")
        except Exception as e:
            log.error(f"Error closing browser: {e}")
        finally:
            self.browser = None

    def _release_held_browser(self) -> None:
        # the driver stays up for the browser about to replace this one
        if self.browser is not None:
            log.warning("A browser is already held; closing it first")
            self._close_held_browser()

    def _driver(self):
        if self._playwright is None:
            self._playwright = sync_playwright().start()
            self._owns_playwright = True
        return self._playwright
