# utils.py
import asyncio
from typing import Any, Awaitable, Optional
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from .constants import COLLAPSED_ICON_MARKER, AREA_ICON_MARKER
from .errors import ScrapeTimeout

async def with_timeout(awaitable: Awaitable[Any], timeout_ms: Optional[float], step: str) -> Any:
    """Await ``awaitable`` under the session deadline.

    Expiry of the local deadline and Playwright's own timeout both surface
    as :class:`ScrapeTimeout`. ``timeout_ms`` of ``None`` or ``0`` disables
    the local deadline.
    """
    seconds = timeout_ms / 1000 if timeout_ms else None
    try:
        return await asyncio.wait_for(awaitable, seconds)
    except (asyncio.TimeoutError, PlaywrightTimeoutError) as e:
        raise ScrapeTimeout(step, timeout_ms or 0) from e

def is_collapsed(twisty_src: Optional[str]) -> bool:
    return bool(twisty_src) and COLLAPSED_ICON_MARKER in twisty_src

def is_area(icon_src: Optional[str]) -> bool:
    return bool(icon_src) and icon_src.endswith(AREA_ICON_MARKER)
