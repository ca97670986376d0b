# Path: craft_notes/loaders/constants.py
"""
Loaders Module Constants for craft_notes

Constants for reading .craft files.
All values here describe the game's ConfigNode save format,
not business logic.
"""

# ==============================================================================
# CONFIGNODE GRAMMAR
# ==============================================================================

NODE_OPEN = '{'
NODE_CLOSE = '}'
VALUE_SEPARATOR = '='
COMMENT_PREFIX = '//'

# Root node of a parsed document has no name in the file
ROOT_NODE_NAME = 'root'

# ==============================================================================
# CRAFT FILE LAYOUT
# ==============================================================================

# Child node type holding each part; the first one is the root part
PART_NODE = 'PART'

# Value on a PART node: '<part name>_<craft id>', e.g. 'mk1pod_4294724440'
PART_ID_KEY = 'part'
CRAFT_ID_SEPARATOR = '_'

# Value on the document root
DESCRIPTION_KEY = 'description'
SHIP_NAME_KEY = 'ship'

# ==============================================================================
# ENCODING DETECTION
# ==============================================================================

# Tried in order; latin-1 never fails so it goes last
TEXT_ENCODINGS = ('utf-8-sig', 'cp1252', 'latin-1')
