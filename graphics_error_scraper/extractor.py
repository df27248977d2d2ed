# extractor.py
import logging
from typing import Any, Dict, List, Optional
from .constants import VIEW_GRAPHICS_SELECTOR, ERROR_INDICATION_SELECTOR, ERROR_CATEGORIES
from .models import SCRUBBED
from .surface import AutomationSurface

logger = logging.getLogger(__name__)

def sanitize_records(records: Optional[List[Any]]) -> List[Any]:
    """Copy records, blanking ``url`` wherever the key exists. Other records pass through as-is."""
    cleaned = []
    for record in records or []:
        if isinstance(record, dict) and 'url' in record:
            record = {**record, 'url': SCRUBBED}
        cleaned.append(record)
    return cleaned

async def error_state_present(surface: AutomationSurface) -> bool:
    # both the graphics action and a visible error indicator are required
    if not await surface.has_element(VIEW_GRAPHICS_SELECTOR):
        return False
    return await surface.has_element(ERROR_INDICATION_SELECTOR)

async def extract(surface: AutomationSurface, node: Any) -> Optional[Dict[str, List[Any]]]:
    """Select ``node`` and pull its sanitized error categories.

    Returns ``None`` when the node cannot be selected or shows no error
    state. Empty categories are left out of the result.
    """
    try:
        await surface.select(node)
    except Exception as e:
        logger.debug(f"Skipping unselectable node: {e}")
        return None
    await surface.settle()
    if not await error_state_present(surface):
        return None

    raw = await surface.error_categories() or {}
    categories = {}
    for key in ERROR_CATEGORIES:
        records = sanitize_records(raw.get(key))
        if records:
            categories[key] = records
    return categories
