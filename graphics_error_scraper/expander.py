# expander.py
import logging
from .surface import AutomationSurface
from .utils import is_collapsed, is_area

logger = logging.getLogger(__name__)

async def expand_pass(surface: AutomationSurface) -> bool:
    """Expand every collapsed area node rendered right now. Returns whether anything changed."""
    changed = False
    for toggle in await surface.tree_toggles():
        if is_collapsed(toggle.twisty_src) and is_area(toggle.icon_src):
            await surface.expand(toggle)
            changed = True
    return changed

async def expand_all(surface: AutomationSurface) -> int:
    """Run expansion passes until one of them changes nothing.

    Only area nodes are opened; collapsed nodes of other kinds stay closed.
    There is no pass limit. Returns the number of passes that expanded
    something.
    """
    passes = 0
    while await expand_pass(surface):
        passes += 1
        logger.debug(f"Expansion pass {passes} revealed new nodes")
        await surface.settle()
    logger.info(f"Tree expanded after {passes} passes")
    return passes
