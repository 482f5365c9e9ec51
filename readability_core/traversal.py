"""
Pre-order depth-first traversal over ScoredNode views.

get_next_node() and remove_and_get_next() are stateless: each call looks at
the current tree shape and the node passed in. Callers drive a walk by
feeding the returned node back in, or use NodeWalker, which does exactly
that and remembers the current position.

Every walk here is a loop; nesting depth is author-controlled and must not
be able to exhaust the call stack.
"""

from typing import Iterator, Optional

from .logger import get_module_logger
from .node import ScoredNode

logger = get_module_logger("traversal")


def get_next_node(node: ScoredNode, ignore_children: bool = False) -> Optional[ScoredNode]:
    """
    Next node in a pre-order depth-first walk.

    Args:
        node: Current node
        ignore_children: Skip node's subtree (it is going away, or the caller
            has already dealt with it)

    Returns:
        The next node, or None when the walk is exhausted
    """
    tree = node.tree

    # First check for kids if those aren't being ignored
    if not ignore_children:
        child = tree.first_child(node.handle)
        if child is not None:
            return ScoredNode(tree, child)

    # Then for siblings
    sibling = tree.next_sibling(node.handle)
    if sibling is not None:
        return ScoredNode(tree, sibling)

    # Finally move up the parent chain and take the first sibling found.
    # Parents themselves were visited before their children.
    parent = tree.parent(node.handle)
    while parent is not None:
        sibling = tree.next_sibling(parent)
        if sibling is not None:
            return ScoredNode(tree, sibling)
        parent = tree.parent(parent)
    return None


def remove_and_get_next(node: ScoredNode) -> Optional[ScoredNode]:
    """
    Detach node from its parent and return the node the walk continues with.

    The next node is worked out before detaching, since detaching clears the
    sibling and parent links the lookup needs.

    Raises:
        TraversalError: if node has no parent (the tree is left untouched)
    """
    next_node = get_next_node(node, ignore_children=True)
    node.tree.detach(node.handle)
    return next_node


def iter_nodes(start: ScoredNode, skip_text: bool = False) -> Iterator[ScoredNode]:
    """
    Yield start and every node after it in pre-order.

    The tree must not be mutated while iterating; use NodeWalker for walks
    that remove nodes.
    """
    node = start
    while node is not None:
        if not (skip_text and node.is_text()):
            yield node
        node = get_next_node(node)


class NodeWalker:
    """
    Cursor over a pre-order walk that allows removing the current node.

    Typical use by a cleanup pass:

        walker = NodeWalker(tree.root_node())
        while walker.current is not None:
            if is_junk(walker.current):
                walker.remove_current()
            else:
                walker.advance()
    """

    def __init__(self, start: ScoredNode):
        self.current: Optional[ScoredNode] = start
        self.removed = 0

    def advance(self) -> Optional[ScoredNode]:
        """Move to the next node, descending into children."""
        if self.current is not None:
            self.current = get_next_node(self.current)
        return self.current

    def skip_children(self) -> Optional[ScoredNode]:
        """Move to the next node outside the current node's subtree."""
        if self.current is not None:
            self.current = get_next_node(self.current, ignore_children=True)
        return self.current

    def remove_current(self) -> Optional[ScoredNode]:
        """Detach the current node and move to the node after its subtree."""
        if self.current is None:
            return None
        removed = self.current
        self.current = remove_and_get_next(removed)
        self.removed += 1
        logger.debug(f"Removed {removed.tag_name}#{removed.handle} during walk")
        return self.current
