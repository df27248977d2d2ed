# report.py
import json
import logging
import os
import sys
from typing import Any, Dict, Iterable, List
from .constants import STDOUT_SENTINEL, JSON_INDENT
from .errors import OutputExistsError
from .extractor import extract
from .models import ErrorReport
from .surface import AutomationSurface
from .tree import list_tree_nodes, reconstruct_path

logger = logging.getLogger(__name__)

async def collect_reports(surface: AutomationSurface) -> List[ErrorReport]:
    """Visit every tree node in document order, one at a time.

    The detail panel is shared by all nodes, so a node is fully processed
    before the next one is selected.
    """
    reports = []
    nodes = await list_tree_nodes(surface)
    for index, node in enumerate(nodes, 1):
        categories = await extract(surface, node)
        if categories is None:
            continue
        path = await reconstruct_path(surface, node)
        logger.info(f"[{index}/{len(nodes)}] Errors found at {path}")
        reports.append(ErrorReport(
            path=path,
            main_errors=categories.get('mainErrors'),
            action_errors=categories.get('actionErrors'),
            info_messages=categories.get('infoMessages'),
        ))
    return reports

def assemble(entries: Iterable[ErrorReport]) -> List[Dict[str, Any]]:
    # visitation order, no merging of duplicate paths
    return [entry.to_dict() for entry in entries]

def render_report(report: List[Dict[str, Any]]) -> str:
    return json.dumps(report, indent=JSON_INDENT, ensure_ascii=False)

def ensure_writable(output: str, force: bool) -> None:
    if not force and output != STDOUT_SENTINEL and os.path.exists(output):
        raise OutputExistsError(output)

def write_report(report: List[Dict[str, Any]], output: str, force: bool = False) -> None:
    text = render_report(report)
    if output == STDOUT_SENTINEL:
        sys.stdout.write(text + '\n')
        return
    ensure_writable(output, force)
    with open(output, 'w', encoding='utf-8') as f:
        f.write(text)
    logger.info(f"Results written to {output}")
