# session.py
import logging
from typing import Any, Dict, Optional
from playwright.async_api import Page, Frame
from .constants import *
from .errors import NavigationFrameNotFound
from .surface import settle_page
from .utils import with_timeout

logger = logging.getLogger(__name__)

JS_LOGOUT = """([frameId, elementId]) => {
    const frame = document.getElementById(frameId);
    const doc = frame && frame.contentWindow ? frame.contentWindow.document : null;
    const el = doc ? doc.getElementById(elementId) : null;
    if (el && el.onmouseup) {
        el.onmouseup(new MouseEvent('mouseup', { bubbles: false }));
    }
}"""

async def resolve_frame(frame: Frame, *selectors: str) -> Optional[Frame]:
    """Follow a chain of iframe selectors, each looked up inside the previous frame."""
    current = frame
    for selector in selectors:
        element = await current.query_selector(selector)
        if element is None:
            return None
        current = await element.content_frame()
        if current is None:
            return None
    return current

async def _submit_login(page: Page) -> None:
    async with page.expect_navigation():
        await page.locator(LOGIN_SUBMIT_SELECTOR).click()

async def login(page: Page, config: Dict[str, Any]) -> Frame:
    """Log in and return the frame that renders the navigation tree."""
    timeout_ms = config.get('timeout_ms', DEFAULT_TIMEOUT_MS)
    logger.info(f"Navigating to {config['target_url']}")
    await with_timeout(page.goto(config['target_url']), timeout_ms, 'navigation')
    logger.info("Logging in...")
    await with_timeout(page.locator(LOGIN_USER_SELECTOR).fill(config['username']), timeout_ms, 'login form')
    await with_timeout(page.locator(LOGIN_PASS_SELECTOR).fill(config['password']), timeout_ms, 'login form')
    await with_timeout(_submit_login(page), timeout_ms, 'login navigation')
    await settle_page(page, timeout_ms)

    nav_frame = await with_timeout(
        resolve_frame(page.main_frame, NAV_TABLE_FRAME_SELECTOR, NAV_CONTENT_FRAME_SELECTOR),
        timeout_ms, 'navigation frame lookup',
    )
    if nav_frame is None:
        raise NavigationFrameNotFound()
    return nav_frame

async def logout(page: Page, timeout_ms: Optional[float] = DEFAULT_TIMEOUT_MS) -> None:
    logger.info("Logging out...")
    await with_timeout(page.locator(SYSTEM_MENU_SELECTOR).click(), timeout_ms, 'logout')
    await settle_page(page, timeout_ms)
    await with_timeout(page.evaluate(JS_LOGOUT, [RIGHT_MENU_FRAME_ID, LOGOUT_ELEMENT_ID]), timeout_ms, 'logout')
    await settle_page(page, timeout_ms)
