# tree.py
import logging
from typing import Any, List
from .surface import AutomationSurface

logger = logging.getLogger(__name__)

PATH_SEPARATOR = ' / '

async def list_tree_nodes(surface: AutomationSurface) -> List[Any]:
    nodes = await surface.tree_nodes()
    logger.info(f"Found {len(nodes)} tree nodes")
    return nodes

async def reconstruct_path(surface: AutomationSurface, node: Any) -> str:
    """Build the root-first ``" / "``-joined label chain of ``node``.

    The walk stops at the first node without a label, or when the
    structural parent is missing or resolves back to the node itself.
    """
    path = ''
    current = node
    while current is not None:
        label = await surface.node_label(current)
        if not label:
            break
        path = label + (PATH_SEPARATOR + path if path else '')
        parent = await surface.structural_parent(current)
        if parent is None or await surface.same_node(parent, current):
            break
        current = parent
    return path
