"""Page navigation and element interaction on a Playwright page.

Every action is followed by a randomized pacing wait (see ``pacing``).
Playwright errors are logged and re-raised unchanged; the two exceptions
are ``get_element_text`` (returns ``None``) and ``type_text`` with
``throw_on_error=False`` (returns ``False``).
"""
import logging
import time
from typing import Any

from ..errors import LifecycleError, LifecycleStage
from .pacing import (
    CLICK_WAIT,
    DEFAULT_WAIT,
    NAVIGATION_WAIT,
    TYPING_WAIT,
    random_wait_ms,
)

log = logging.getLogger(__name__)


class PageHandler:
    """Handles navigation and element interactions for a single page.

    ``events`` is an optional ``ActionEventLogger`` that receives one
    record per navigation or interaction.
    """

    def __init__(self, page, events=None):
        if page is None:
            raise LifecycleError(LifecycleStage.PAGE, "open a page before wrapping it")
        self.page = page
        self.events = events

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def go_to_url(self, url: str, wait_until: str = "load",
                  wait_min: int = NAVIGATION_WAIT[0], wait_max: int = NAVIGATION_WAIT[1],
                  **options: Any) -> None:
        """Go to ``url`` and pause. Extra ``options`` go to ``page.goto``."""
        t0 = time.monotonic()
        try:
            log.info(f"Goto: {url}")
            self.page.goto(url, wait_until=wait_until, **options)
            waited = self.wait_for_random_timeout(wait_min, wait_max)
        except Exception as e:
            log.error(f"Error going to url: {url}, error: {e}")
            self._record_navigation("goto", url, False, t0, error=e)
            raise
        self._record_navigation("goto", url, True, t0, waited)

    def go_back(self, wait_until: str = "load",
                wait_min: int = NAVIGATION_WAIT[0], wait_max: int = NAVIGATION_WAIT[1],
                **options: Any) -> None:
        """Navigate to the previous page in history."""
        t0 = time.monotonic()
        try:
            log.info("Go back")
            self.page.go_back(wait_until=wait_until, **options)
            waited = self.wait_for_random_timeout(wait_min, wait_max)
        except Exception as e:
            log.error(f"Error going back: {e}")
            self._record_navigation("back", self._current_url(), False, t0, error=e)
            raise
        self._record_navigation("back", self._current_url(), True, t0, waited)

    def go_forward(self, wait_until: str = "load",
                   wait_min: int = NAVIGATION_WAIT[0], wait_max: int = NAVIGATION_WAIT[1],
                   **options: Any) -> None:
        """Navigate to the next page in history."""
        t0 = time.monotonic()
        try:
            self.page.go_forward(wait_until=wait_until, **options)
            waited = self.wait_for_random_timeout(wait_min, wait_max)
            log.info("Go forward")
        except Exception as e:
            log.error(f"Error going forward: {e}")
            self._record_navigation("forward", self._current_url(), False, t0, error=e)
            raise
        self._record_navigation("forward", self._current_url(), True, t0, waited)

    def reload_page(self, wait_until: str = "load",
                    wait_min: int = NAVIGATION_WAIT[0], wait_max: int = NAVIGATION_WAIT[1],
                    **options: Any) -> None:
        """Reload the current page."""
        t0 = time.monotonic()
        try:
            self.page.reload(wait_until=wait_until, **options)
            waited = self.wait_for_random_timeout(wait_min, wait_max)
            log.info("Reloaded page")
        except Exception as e:
            log.error(f"Error reloading page: {e}")
            self._record_navigation("reload", self._current_url(), False, t0, error=e)
            raise
        self._record_navigation("reload", self._current_url(), True, t0, waited)

    def wait_for_random_timeout(self, wait_min: int = DEFAULT_WAIT[0],
                                wait_max: int = DEFAULT_WAIT[1]) -> int:
        """Pause the page for a random time between the bounds (ms).

        Returns the number of milliseconds waited.
        """
        wait_ms = random_wait_ms(wait_min, wait_max)
        self.page.wait_for_timeout(wait_ms)
        log.debug(f"    wait {wait_ms}ms")
        return wait_ms

    # ------------------------------------------------------------------
    # Element queries
    # ------------------------------------------------------------------

    def get_elements(self, selector: str) -> list:
        """Return a locator for every element currently matching ``selector``."""
        try:
            return self.page.locator(selector).all()
        except Exception as e:
            log.error(f"Error getting elements with selector {selector}, error: {e}")
            raise

    def get_element_text(self, selector_or_locator) -> str | None:
        """Return the text content of the element, or ``None`` on any error."""
        try:
            return self._resolve(selector_or_locator).text_content()
        except Exception as e:
            log.error(f"Error getting element text with selector {_describe(selector_or_locator)}: {e}")
            return None

    def get_element_attribute(self, selector_or_locator, attribute_name: str):
        """Return the value of ``attribute_name`` on the element."""
        try:
            return self._resolve(selector_or_locator).get_attribute(attribute_name)
        except Exception as e:
            log.error(f"Error getting element attribute {attribute_name}: {e}")
            raise

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    def click_and_wait(self, selector_or_locator,
                       wait_min: int = CLICK_WAIT[0], wait_max: int = CLICK_WAIT[1]) -> None:
        """Click the element, then pause before the next action."""
        target = _describe(selector_or_locator)
        t0 = time.monotonic()
        try:
            self._resolve(selector_or_locator).click()
            waited = self.wait_for_random_timeout(wait_min, wait_max)
            log.info("Clicked element")
        except Exception as e:
            log.error(f"Error clicking element {target}: {e}")
            self._record_interaction("click", target, False, t0, error=e)
            raise
        self._record_interaction("click", target, True, t0, waited)

    def type_text(self, selector_or_locator, text: str,
                  wait_min: int = TYPING_WAIT[0], wait_max: int = TYPING_WAIT[1],
                  throw_on_error: bool = True) -> bool:
        """Fill the input element with ``text``, then pause.

        Returns ``True`` when filled. When ``throw_on_error`` is false a
        failure (typically a non-input element) is logged as a warning and
        ``False`` is returned instead of raising.
        """
        target = _describe(selector_or_locator)
        t0 = time.monotonic()
        try:
            self._resolve(selector_or_locator).fill(text)
            waited = self.wait_for_random_timeout(wait_min, wait_max)
            log.info(f"Filled input element {target}")
            log.debug(f"    typed {text!r}")
        except Exception as e:
            self._record_interaction("fill", target, False, t0, error=e)
            if throw_on_error:
                log.error(f"Error filling element {target}: {e}")
                raise
            log.warning(f"Could not fill element {target} (likely not an input element): {e}")
            return False
        self._record_interaction("fill", target, True, t0, waited)
        return True

    def click_element_with_text(self, selector: str, element_text: str,
                                wait_min: int = CLICK_WAIT[0],
                                wait_max: int = CLICK_WAIT[1]) -> None:
        """Click the first ``selector`` match containing ``element_text``."""
        t0 = time.monotonic()
        try:
            self.page.locator(selector, has_text=element_text).click()
            waited = self.wait_for_random_timeout(wait_min, wait_max)
            log.info(f"Clicked element with text: {element_text}")
        except Exception as e:
            log.error(f"Error clicking element with text: {element_text}, error: {e}")
            self._record_interaction("click_text", selector, False, t0, error=e)
            raise
        self._record_interaction("click_text", selector, True, t0, waited, detail=element_text)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve(self, selector_or_locator):
        if isinstance(selector_or_locator, str):
            return self.page.locator(selector_or_locator)
        return selector_or_locator

    def _current_url(self) -> str:
        try:
            return str(self.page.url)
        except Exception:
            return ""

    def _record_navigation(self, action, url, ok, t0, waited=None, error=None):
        if self.events is None:
            return
        if error is not None:
            self.events.log_error(action, url, str(error))
        self.events.log_navigation(action, url, ok, round(time.monotonic() - t0, 3), waited)

    def _record_interaction(self, action, target, ok, t0, waited=None, detail=None, error=None):
        if self.events is None:
            return
        if error is not None:
            self.events.log_error(action, target, str(error))
        self.events.log_interaction(action, target, ok, round(time.monotonic() - t0, 3),
                                    waited, detail)


def _describe(selector_or_locator) -> str:
    if isinstance(selector_or_locator, str):
        return selector_or_locator
    return repr(selector_or_locator)
