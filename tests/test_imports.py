"""Smoke tests: all public modules are importable."""


def test_top_level_imports():
    from browser_toolkit import (
        BrowserManager,
        FileManager,
        PageHandler,
        LifecycleError,
        LifecycleStage,
    )
    assert callable(BrowserManager)
    assert callable(FileManager)
    assert callable(PageHandler)
    assert issubclass(LifecycleError, Exception)
    assert LifecycleStage.CONTEXT.value == "context"


def test_page_imports():
    from browser_toolkit.page import (
        PageHandler,
        random_wait_ms,
        NAVIGATION_WAIT,
        CLICK_WAIT,
        TYPING_WAIT,
        DEFAULT_WAIT,
    )
    assert callable(PageHandler)
    assert callable(random_wait_ms)
    assert NAVIGATION_WAIT == (4000, 7000)
    assert CLICK_WAIT == (3000, 7000)
    assert TYPING_WAIT == (3000, 8000)
    assert DEFAULT_WAIT == (5000, 12000)


def test_telemetry_imports():
    from browser_toolkit.telemetry import ActionEventLogger
    assert callable(ActionEventLogger)
