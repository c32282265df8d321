"""Generic tree node with text serialization and uninformed tree search."""
import logging
from collections import deque
from typing import Any, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


def is_number(text: str) -> bool:
    """Return True if every character of text is an ASCII digit."""
    return all("0" <= ch <= "9" for ch in text)


class TreeNode:
    """A tree node that owns its children and knows its parent.

    Serialized form of a node is ``"<value> {<n> <child>...} "`` where
    ``n`` is the number of children, so a leaf ``a`` is ``"a {0 } "``.
    """

    def __init__(
        self,
        value: Any = "",
        parent: Optional["TreeNode"] = None,
        children: Optional[Iterable["TreeNode"]] = None,
    ):
        self.value = value
        self.parent = parent
        self.children: List[TreeNode] = []
        for child in children or ():
            self.add_child(child)

    def add_child(self, child: Any) -> "TreeNode":
        """Append a child (a node or a raw value) and return it."""
        if not isinstance(child, TreeNode):
            child = TreeNode(child)
        child.parent = self
        self.children.append(child)
        return child

    def get_path(self) -> List[Any]:
        """Return the values from the root down to this node."""
        path = [self.value]
        node = self.parent
        while node is not None:
            path.append(node.value)
            node = node.parent
        path.reverse()
        return path

    def to_string(self) -> str:
        """Serialize this subtree."""
        parts = [f"{self.value} {{{len(self.children)} "]
        parts.extend(child.to_string() for child in self.children)
        parts.append("} ")
        return "".join(parts)

    @classmethod
    def from_string(cls, text: str) -> "TreeNode":
        """Build a tree from its serialized form."""
        node, _ = parse_subtree(text)
        return node

    def iter_nodes(self):
        """Yield every node of the subtree in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r}, children={len(self.children)})"


def parse_subtree(
    text: str, parent: Optional[TreeNode] = None
) -> Tuple[TreeNode, str]:
    """
    Parse one serialized subtree from the front of text.

    Parsing is lenient: a missing brace, a malformed child count or a
    missing closing brace stops parsing and keeps what was read so far.

    Args:
        text: Serialized tree text.
        parent: Parent to attach the parsed node to.

    Returns:
        Tuple of (parsed node, unconsumed remainder of text).
    """
    node = TreeNode("", parent)

    n = text.find(" ")
    if n == -1:
        return node, text

    node.value = text[:n]
    rest = text[n + 1:]

    if not rest.startswith("{"):
        return node, rest
    rest = rest[1:]

    n = rest.find(" ")
    if n == -1:
        return node, rest

    count = rest[:n]
    if not count or not is_number(count):
        logger.debug("Malformed child count %r for node %r", count, node.value)
        return node, rest
    rest = rest[n + 1:]

    # A count larger than the text holds ends at the first child that reads nothing
    for _ in range(int(count)):
        if not rest:
            break
        child, remainder = parse_subtree(rest, node)
        if len(remainder) >= len(rest):
            break
        node.children.append(child)
        rest = remainder

    n = rest.find("}")
    if n == -1:
        return node, rest

    return node, rest[n + 2:]


def bfs(root: TreeNode, looking_for: Any) -> Optional[TreeNode]:
    """Breadth-first search for the first node holding looking_for."""
    open_list = deque([root])
    while open_list:
        current = open_list.popleft()
        if current.value == looking_for:
            return current
        open_list.extend(current.children)
    return None


def dfs(root: TreeNode, looking_for: Any) -> Optional[TreeNode]:
    """Depth-first search; children are pushed in order, so the last child is expanded first."""
    open_list = [root]
    while open_list:
        current = open_list.pop()
        if current.value == looking_for:
            return current
        open_list.extend(current.children)
    return None


SEARCH_METHODS = {
    "bfs": bfs,
    "dfs": dfs,
}
