"""
テスト共通のフェイク実装
"""
import copy
import os
import sys

# プロジェクトルートをPythonパスに追加
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from graphics_error_scraper.constants import VIEW_GRAPHICS_SELECTOR, ERROR_INDICATION_SELECTOR
from graphics_error_scraper.models import TreeToggle
from graphics_error_scraper.surface import AutomationSurface

COLLAPSED_SRC = '/images/tree/clean_collapsed.png'
EXPANDED_SRC = '/images/tree/clean_expanded.png'
ICONS = {
    'area': '/images/icons/area.gif',
    'site': '/images/icons/site.gif',
    'device': '/images/icons/device.gif',
}


class FakeTreeNode:
    """Expandable container as rendered by the tree control."""

    def __init__(self, name, kind='area', children=None, collapsed=None):
        self.name = name
        self.kind = kind
        self.children = children or []
        self.collapsed = bool(self.children) if collapsed is None else collapsed


class FakeNode:
    """Selectable content node with its detail panel state."""

    def __init__(self, label, parent=None, selectable=True, view_graphics=False,
                 indication_visible=False, errors=None):
        self.label = label
        self.parent = parent
        self.selectable = selectable
        self.view_graphics = view_graphics
        self.indication_visible = indication_visible
        self.errors = errors or {}


class FakeSurface(AutomationSurface):
    def __init__(self, roots=(), nodes=()):
        self.roots = list(roots)
        self.nodes = list(nodes)
        self.scans = 0
        self.settles = 0
        self.expanded = []
        self.selections = []
        self.selected = None

    def rendered(self):
        found = []

        def walk(node):
            found.append(node)
            if not node.collapsed:
                for child in node.children:
                    walk(child)

        for root in self.roots:
            walk(root)
        return found

    async def tree_toggles(self):
        self.scans += 1
        return [
            TreeToggle(node, COLLAPSED_SRC if node.collapsed else EXPANDED_SRC, ICONS[node.kind])
            for node in self.rendered()
        ]

    async def expand(self, toggle):
        toggle.handle.collapsed = False
        self.expanded.append(toggle.handle.name)

    async def settle(self):
        self.settles += 1

    async def tree_nodes(self):
        return list(self.nodes)

    async def node_label(self, node):
        return node.label

    async def structural_parent(self, node):
        return node.parent

    async def same_node(self, a, b):
        return a is b

    async def select(self, node):
        if not node.selectable:
            raise RuntimeError('Element is not attached to the DOM')
        self.selected = node
        self.selections.append(node)

    async def has_element(self, selector):
        if self.selected is None:
            return False
        if selector == VIEW_GRAPHICS_SELECTOR:
            return self.selected.view_graphics
        if selector == ERROR_INDICATION_SELECTOR:
            return self.selected.indication_visible
        return False

    async def error_categories(self):
        errors = copy.deepcopy(self.selected.errors)
        return {
            'mainErrors': errors.get('mainErrors', []),
            'actionErrors': errors.get('actionErrors', []),
            'infoMessages': errors.get('infoMessages', []),
        }


def erroring_node(label, parent=None, **errors):
    """Node that passes error detection and reports ``errors``."""
    return FakeNode(label, parent=parent, view_graphics=True, indication_visible=True, errors=errors)
