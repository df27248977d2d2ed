# surface.py
"""
Automation surface used by the tree engine.

``AutomationSurface`` lists the capabilities the expander, the tree walker
and the extractor need. ``PlaywrightSurface`` provides them on top of a
logged-in Playwright page and the nested frame that renders the tree.
"""
from typing import Any, Dict, List, Optional
from playwright.async_api import Page, Frame, ElementHandle
from .constants import *
from .models import TreeToggle
from .utils import with_timeout

JS_DESCRIBE_TOGGLE = """(el, iconSelector) => {
    const icon = el.parentElement ? el.parentElement.querySelector(iconSelector) : null;
    return { twisty: el.getAttribute('src'), icon: icon ? icon.getAttribute('src') : null };
}"""

JS_CLICK = "el => el.click()"

JS_NODE_LABEL = """(el, selector) => {
    const label = el.querySelector(selector);
    return label ? label.innerText : null;
}"""

JS_STRUCTURAL_PARENT = """(el, [depth, selector]) => {
    let ancestor = el;
    for (let i = 0; i < depth && ancestor; i++) {
        ancestor = ancestor.parentElement;
    }
    return ancestor ? ancestor.querySelector(selector) : null;
}"""

JS_SAME_NODE = "(a, b) => a === b"

JS_ERROR_CATEGORIES = "() => ({ %s })" % ', '.join(
    f"{key}: {ERROR_ACCESSOR}.{getter}()" for key, getter in ERROR_CATEGORIES.items()
)


async def settle_page(page: Page, timeout_ms: Optional[float] = DEFAULT_TIMEOUT_MS) -> None:
    await with_timeout(page.wait_for_timeout(SETTLE_DELAY_MS), timeout_ms, 'settle delay')
    await with_timeout(page.wait_for_load_state('networkidle'), timeout_ms, 'network idle wait')


class AutomationSurface:
    """Capabilities consumed by the tree engine.

    Node handles are opaque to the engine; only the surface that produced
    them interprets them.
    """

    async def tree_toggles(self) -> List[TreeToggle]:
        """Every expand/collapse control currently rendered, with its markers."""
        raise NotImplementedError

    async def expand(self, toggle: TreeToggle) -> None:
        raise NotImplementedError

    async def settle(self) -> None:
        """Give the application time to render, then wait for network idle."""
        raise NotImplementedError

    async def tree_nodes(self) -> List[Any]:
        """Content nodes of the tree in document order."""
        raise NotImplementedError

    async def node_label(self, node: Any) -> Optional[str]:
        raise NotImplementedError

    async def structural_parent(self, node: Any) -> Optional[Any]:
        """Content node of the enclosing tree node, if the markup has one."""
        raise NotImplementedError

    async def same_node(self, a: Any, b: Any) -> bool:
        raise NotImplementedError

    async def select(self, node: Any) -> None:
        """Select ``node`` in the application. May raise for a stale node."""
        raise NotImplementedError

    async def has_element(self, selector: str) -> bool:
        raise NotImplementedError

    async def error_categories(self) -> Dict[str, List[Any]]:
        """Raw records from the application's diagnostic accessor."""
        raise NotImplementedError


class PlaywrightSurface(AutomationSurface):
    def __init__(self, page: Page, nav_frame: Frame, timeout_ms: Optional[float] = DEFAULT_TIMEOUT_MS):
        self.page = page
        self.nav_frame = nav_frame
        self.timeout_ms = timeout_ms

    async def _await(self, awaitable, step: str):
        return await with_timeout(awaitable, self.timeout_ms, step)

    async def tree_toggles(self) -> List[TreeToggle]:
        handles = await self._await(self.nav_frame.query_selector_all(TWISTY_SELECTOR), 'tree scan')
        toggles = []
        for handle in handles:
            info = await self._await(handle.evaluate(JS_DESCRIBE_TOGGLE, TWISTY_ICON_SELECTOR), 'tree scan')
            toggles.append(TreeToggle(handle, info.get('twisty'), info.get('icon')))
        return toggles

    async def expand(self, toggle: TreeToggle) -> None:
        await self._await(toggle.handle.evaluate(JS_CLICK), 'tree expansion')

    async def settle(self) -> None:
        await settle_page(self.page, self.timeout_ms)

    async def tree_nodes(self) -> List[ElementHandle]:
        return await self._await(self.nav_frame.query_selector_all(TREE_NODE_SELECTOR), 'node listing')

    async def node_label(self, node: ElementHandle) -> Optional[str]:
        return await self._await(node.evaluate(JS_NODE_LABEL, NODE_LABEL_SELECTOR), 'label lookup')

    async def structural_parent(self, node: ElementHandle) -> Optional[ElementHandle]:
        handle = await self._await(
            node.evaluate_handle(JS_STRUCTURAL_PARENT, [STRUCTURAL_PARENT_DEPTH, TREE_CONTENT_SELECTOR]),
            'ancestor lookup',
        )
        element = handle.as_element()
        if element is None:
            await handle.dispose()
        return element

    async def same_node(self, a: ElementHandle, b: ElementHandle) -> bool:
        return await self._await(a.evaluate(JS_SAME_NODE, b), 'ancestor lookup')

    async def select(self, node: ElementHandle) -> None:
        await self._await(node.click(timeout=SELECT_TIMEOUT_MS), 'node selection')

    async def has_element(self, selector: str) -> bool:
        return await self._await(self.page.query_selector(selector), f'query {selector}') is not None

    async def error_categories(self) -> Dict[str, List[Any]]:
        return await self._await(self.page.evaluate(JS_ERROR_CATEGORIES), 'error extraction')
