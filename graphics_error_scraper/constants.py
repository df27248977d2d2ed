# constants.py
import logging

logger = logging.getLogger(__name__)

VERSION = "v0.1.2"

# Defaults
DEFAULT_OUTPUT = "errors.json"
STDOUT_SENTINEL = "-"
DEFAULT_TIMEOUT_MS = 180000
SETTLE_DELAY_MS = 1000
# Selecting a tree node that never becomes clickable fails after this long
SELECT_TIMEOUT_MS = 5000
JSON_INDENT = 2

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_OUTPUT_EXISTS = 2
EXIT_NAVIGATION = 3

# Login form
LOGIN_USER_SELECTOR = '#nameInput'
LOGIN_PASS_SELECTOR = '#pass'
LOGIN_SUBMIT_SELECTOR = '#submit'

# Nested documents holding the tree: page -> #navTableFrame -> #navContent
NAV_TABLE_FRAME_SELECTOR = '#navTableFrame'
NAV_CONTENT_FRAME_SELECTOR = '#navContent'

# Logout
SYSTEM_MENU_SELECTOR = 'img[title="System Menu"]'
RIGHT_MENU_FRAME_ID = 'rightMenuiframe'
LOGOUT_ELEMENT_ID = 'main_logout'

# Tree markup
TWISTY_SELECTOR = '.TreeCtrl-twisty'
TWISTY_ICON_SELECTOR = '.TreeCtrl-content > img.TreeCtrl-icon'
TREE_CONTENT_SELECTOR = '.TreeCtrl-content'
TREE_NODE_SELECTOR = '.TreeCtrl-outer[id^=geoTree] ' + TREE_CONTENT_SELECTOR
NODE_LABEL_SELECTOR = '.TreeCtrl-text'
COLLAPSED_ICON_MARKER = '/clean_collapsed.png'
AREA_ICON_MARKER = '/area.gif'
# Number of parentElement hops from a .TreeCtrl-content to the element that
# contains its parent's .TreeCtrl-content. Depends on the application's markup.
STRUCTURAL_PARENT_DEPTH = 4

# Detail panel
VIEW_GRAPHICS_SELECTOR = '#actButtonSpan > span[title="View graphics"]'
ERROR_INDICATION_SELECTOR = '#errorIndication:not([style*="display: none"])'

# In-page diagnostic accessor
ERROR_ACCESSOR = 'DisplayError'
ERROR_CATEGORIES = {
    'mainErrors': 'getMainErrors',
    'actionErrors': 'getActionErrors',
    'infoMessages': 'getInfoMessages',
}
