# Path: craft_notes/loaders/config_node.py
"""
ConfigNode Parser for craft_notes

Parses the game's brace-delimited key/value save format into a tree
of ConfigNode objects.

Format:
    ship = Untitled Space Craft
    description = Heavy lifter¤Stage 1 is recoverable
    PART
    {
        part = mk1pod_4294724440
        MODULE
        {
            name = ModuleCommand
        }
    }

Rules:
    - 'key = value' splits at the first '='; both sides are stripped
    - A node opens with its name followed by '{' (same or next line)
    - '}' closes the innermost node
    - '//' starts a comment running to end of line
    - Unbalanced braces make the document malformed
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .constants import (
    NODE_OPEN,
    NODE_CLOSE,
    VALUE_SEPARATOR,
    COMMENT_PREFIX,
    ROOT_NODE_NAME,
    TEXT_ENCODINGS,
)


_BRACE_SPLIT = re.compile(r'([{}])')


class ConfigNodeParseError(ValueError):
    """Raised when a document is not well-formed ConfigNode text."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


@dataclass
class ConfigNode:
    """
    One node of a ConfigNode document.

    Values keep file order and may repeat (a PART has one 'link' value
    per child part), so they are stored as a list of pairs.

    Attributes:
        name: Node type (e.g. 'PART', 'MODULE'); 'root' for the document
        values: (key, value) pairs in file order
        nodes: Child nodes in file order
    """
    name: str
    values: list[tuple[str, str]] = field(default_factory=list)
    nodes: list['ConfigNode'] = field(default_factory=list)

    def get_value(self, key: str) -> Optional[str]:
        """Return the first value stored under key, or None."""
        for value_key, value in self.values:
            if value_key == key:
                return value
        return None

    def get_values(self, key: str) -> list[str]:
        """Return every value stored under key."""
        return [value for value_key, value in self.values if value_key == key]

    def has_value(self, key: str) -> bool:
        return self.get_value(key) is not None

    def get_nodes(self, name: str) -> list['ConfigNode']:
        """Return direct child nodes of the given type."""
        return [node for node in self.nodes if node.name == name]

    def get_node(self, name: str) -> Optional['ConfigNode']:
        """Return the first direct child node of the given type, or None."""
        for node in self.nodes:
            if node.name == name:
                return node
        return None


def _strip_comment(line: str) -> str:
    index = line.find(COMMENT_PREFIX)
    if index == -1:
        return line
    return line[:index]


def parse_config_node(text: str) -> ConfigNode:
    """
    Parse ConfigNode text into a document tree.

    Args:
        text: Full document text

    Returns:
        Unnamed root node holding top-level values and nodes

    Raises:
        ConfigNodeParseError: On a stray '}' or an unclosed node
    """
    root = ConfigNode(ROOT_NODE_NAME)
    stack = [root]
    pending_name: Optional[str] = None

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = _strip_comment(raw_line).strip()
        if not line:
            continue

        if VALUE_SEPARATOR in line and line[0] not in (NODE_OPEN, NODE_CLOSE):
            key, _, value = line.partition(VALUE_SEPARATOR)
            key = key.strip()
            if key:
                stack[-1].values.append((key, value.strip()))
            pending_name = None
            continue

        for token in _BRACE_SPLIT.split(line):
            token = token.strip()
            if not token:
                continue

            if token == NODE_OPEN:
                node = ConfigNode(pending_name or '')
                stack[-1].nodes.append(node)
                stack.append(node)
                pending_name = None
            elif token == NODE_CLOSE:
                if len(stack) == 1:
                    raise ConfigNodeParseError(
                        f"unexpected '{NODE_CLOSE}' with no open node", line_number
                    )
                stack.pop()
                pending_name = None
            else:
                pending_name = token

    if len(stack) > 1:
        raise ConfigNodeParseError(f"node '{stack[-1].name}' is never closed")

    return root


def decode_text(data: bytes) -> str:
    """
    Decode raw file bytes, trying each known encoding in turn.

    Args:
        data: Raw file contents

    Returns:
        Decoded text
    """
    for encoding in TEXT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode('utf-8', errors='replace')


def load_config_node(path: Path) -> ConfigNode:
    """
    Read and parse a ConfigNode file.

    Args:
        path: File to read

    Returns:
        Root node of the document

    Raises:
        OSError: If the file cannot be read
        ConfigNodeParseError: If the document is malformed
    """
    return parse_config_node(decode_text(Path(path).read_bytes()))


__all__ = [
    'ConfigNode',
    'ConfigNodeParseError',
    'parse_config_node',
    'decode_text',
    'load_config_node',
]
